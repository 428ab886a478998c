# gatecore/core/__init__.py
"""
GateCore core components.

- errors: exception types and stable error codes
- validate: error collector and rules
- transaction: transactional scope interface
- runnable: the validation-gated state machine and its entry points
"""
