"""
OOP Lessons - Introductory Object-Oriented Programming, Built for Learning

Each sub-package is a standalone demonstration of one concept:
1. basics - classes, constructors, string rendering
2. inheritance - base classes and subclasses
3. encapsulation - private state behind a narrow interface
4. error_handling - custom exceptions, try/except/finally
5. pipelines - filter/map/sort pipelines, sequential vs parallel
6. concurrency - fire-and-forget background tasks
7. clean_code - conditional dispatch refactored into strategies
8. solid - the Open/Closed Principle
9. unit_testing - dependency injection for testability

None of the examples depend on each other. Run them with `oop-lessons run <name>`.
"""

__version__ = "0.1.0"
