"""boxgen: generate on-device box tests from compiler test fixtures."""
