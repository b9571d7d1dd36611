"""Domain layer for appbuilder.

- shared: Result monad and the build error taxonomy
- build: configuration models and the pure CSS/HTML/integrity transforms
"""
