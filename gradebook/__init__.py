"""
Gradebook - single-user record manager for student scores and labeled items.

Packages:
- domain/      entity models (Student, Item)
- components/  classifier, validation, store, persistence, statistics, items
- adapters/    key-value byte stores and clock
- rules/       rules.yaml loading
- services/    presentation-facing facades
- app_shell/   config resolution, wiring, command line shell
"""

__version__ = "0.1.0"
