from setuptools import setup

setup(name='bagreader',
      version='0.1',
      description="bagreader: a Python reader for BagIt bags that loads them into an immutable model",
      scripts=[ ],
      packages=['bagreader', 'bagreader.access', 'bagreader.parse'],
      python_requires='>=3.6',
      # fs and bagit still import pkg_resources
      install_requires=['bagit', 'fs', 'setuptools<81'],
      extras_require={ 'test': ['pytest'] },
      test_suite="tests.suite",
      test_runner="unittest:TextTestRunner"
)
