from unittest import TestLoader, TestSuite

def additional_tests():
    from . import test_bagit, test_exceptions

    suites = [TestLoader().loadTestsFromModule(m)
              for m in (test_bagit, test_exceptions)]
    return TestSuite(suites)
