"""
Drako Test Suite

Unit tests for the classifier, registry, provisioner, runner and dispatcher,
plus pipeline and CLI tests that provision real directories in temporary
locations.
"""
