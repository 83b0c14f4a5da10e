"""
Identity Domain

Password policy rules, value objects and the strength estimator port.
"""
