"""Settings package for the hotel booking API.

`base.py` contains common configuration shared across environments.
`dev.py`, `prod.py` and `test.py` extend it with environment specific
overrides.
"""
