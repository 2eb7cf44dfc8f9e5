"""
Basics - classes, constructors and string rendering.

- Customer: a value object that knows how to render itself
- fibonacci: a plain function next to the classes that use it
- application: a tiny menu choosing which example to run
"""
