"""
Token Relay Modules - Black Box Architecture

- relay: outbound provider call and result classification
- api: translation of relay results into HTTP responses
"""
