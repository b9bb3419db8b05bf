from dataclasses import dataclass


@dataclass(frozen=True)
class RenderOptions:
    """
    Holds options that control how a scope and its items are rendered to text.

    For safety, objects of this type are immutable. To "modify" a set of options, you can create an altered copy by
    calling its `derive` function, similar to how one would call `replace` for a named tuple.

    Attributes:
        indent: The number of columns by which the contents of a block will be indented
        use_tabs: If True, each indent level is rendered as a single tab character and `indent` is ignored
    """

    indent: int = 4
    use_tabs: bool = False

    def __post_init__(self):
        if self.indent < 0:
            raise ValueError(f"Indent must be non-negative, got {self.indent}")

    @property
    def indent_unit(self) -> str:
        """The text that is prepended to a line once for each level of indentation."""
        return '\t' if self.use_tabs else ' ' * self.indent

    def derive(self, indent=None, use_tabs=None):
        """
        Creates a modified copy of these options (options are otherwise immutable).

        Args:
            indent: The new indent size (or None to leave it unchanged)
            use_tabs: The new tabs vs. spaces setting (or None to leave it unchanged)

        Returns:
            A set of options with the modifications performed.
        """
        def coalesce(a, b):
            return a if b is None else b

        return RenderOptions(
            indent=coalesce(self.indent, indent),
            use_tabs=coalesce(self.use_tabs, use_tabs),
        )
