"""
Core module - Business logic for pagesort

- sorting: the smart sort pipeline
- config: sorter settings loaded from YAML
- preview: rich rendering of a sort plan
"""
