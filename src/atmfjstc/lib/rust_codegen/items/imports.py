from dataclasses import dataclass
from typing import Optional

from atmfjstc.lib.ez_repr import EZRepr


@dataclass(repr=False)
class Import(EZRepr):
    """
    A single type imported into a scope from a given path.

    Imports are not rendered by themselves. The owning `Scope` groups them by visibility and path and renders the
    resulting ``use`` statements.
    """
    path: str
    ty: str
    visibility: Optional[str] = None

    def vis(self, visibility: Optional[str]) -> 'Import':
        self.visibility = visibility
        return self
