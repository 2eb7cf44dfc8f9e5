"""
Error handling - raising, catching and cleaning up.

- account: a custom exception guarding a withdrawal
- demos: catching built-in exceptions, multiple handlers, finally
- file_reader: I/O errors surfaced to the caller
"""
