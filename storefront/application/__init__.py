"""
Application layer package.

Contains the mediator and validation pipeline plus the use cases
they dispatch to. Each use case is a single class with one public
method. This layer depends on domain ports, never on infrastructure.
"""
