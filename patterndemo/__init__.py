"""patterndemo - Root Package.

This package builds the illustrative object graphs of the classic creational
design patterns (Factory Method, Singleton, Prototype, Abstract Factory) and
returns the trace lines a reader of the pattern documentation would see.

Key Components:
    - domain: Pattern object graphs, one bounded context per pattern family
    - infrastructure: Singleton, prototype and service registries; logging
    - application: The PatternDemoRunner
    - config: Pydantic configuration schemas and the configuration manager
    - cli: Command line interface
"""

from ._package import PACKAGE_NAME, __version__

"""
Usage:
    >>> patterndemo factory-method road
    >>> patterndemo payment credit_card 99.95
    >>> patterndemo singleton db1:admin db2:guest
"""
