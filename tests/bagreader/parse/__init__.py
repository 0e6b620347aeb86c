from unittest import TestLoader, TestSuite

def additional_tests():
    from . import test_tagfile, test_paths, test_manifest, test_fetch

    suites = [TestLoader().loadTestsFromModule(m)
              for m in (test_tagfile, test_paths, test_manifest, test_fetch)]
    return TestSuite(suites)
