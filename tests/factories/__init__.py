"""
Test Data Factories

Sample models and factory_boy factories shared by the unit and integration
tests.
"""
