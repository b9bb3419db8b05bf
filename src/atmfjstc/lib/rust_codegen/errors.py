class RustCodegenError(Exception):
    """
    Base class for all exceptions raised by the code generator itself.
    """


class DuplicateModuleError(RustCodegenError):
    """
    Raised when pushing a module whose name is already taken by another module in the same scope.

    This signals a bug in the calling program, not a runtime condition, and is not meant to be caught. Use
    `Scope.get_or_new_module` when the module may already exist.
    """
    module_name: str

    def __init__(self, module_name: str):
        super().__init__(f"A module named '{module_name}' is already defined in this scope")

        self.module_name = module_name
