"""
Clean code - the same order processing written twice.

DirtyOrder branches on an integer code: every new payment type means editing
it. Order delegates to a PaymentMethod: new payment types are new classes.
"""
