from unittest import TestLoader, TestSuite

def additional_tests():
    from . import test_constants, test_algorithms, test_model, test_reader

    suites = [TestLoader().loadTestsFromModule(m)
              for m in (test_constants, test_algorithms, test_model, test_reader)]
    return TestSuite(suites)
