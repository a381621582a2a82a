"""
# Snippet-Generator: contexts.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Cross-occurrence generation state.
"""


class GenerationContext:
    """
    Mutable state shared by every occurrence of one input line.

    - «vars», declared variable name to type
    - «types», declared type names
    - «last_var» and «last_type», the most recent declarations, used for smart defaults

    A context is created fresh per input line and discarded after assembly.
    """
    vars: dict[str, str]
    types: set[str]
    last_var: str
    last_type: str

    def __init__(self):
        self.vars = {}
        self.types = set()
        self.last_var = ''
        self.last_type = ''

    def compute_unique_name(self, base_name: str) -> str:
        """
        Resolve a collision with a declared variable by numeric suffix: `x`, `x1`, `x2`, ...
        """
        name = base_name
        suffix = 1
        while name in self.vars:
            name = f'{base_name}{suffix}'
            suffix += 1

        return name

    def register_variable(self, name: str, type_: str):
        self.vars[name] = type_
        self.last_var = name

    def declare_variable(self, type_: str, base_name: str, initialiser: str) -> str:
        """
        Declare a collision-free variable and return its declaration statement.
        """
        name = self.compute_unique_name(base_name)
        self.register_variable(name, type_)

        return f'{type_} {name} = {initialiser};'

    def register_type(self, name: str):
        self.types.add(name)
        self.last_type = name
