class InvalidArgument(ValueError):
    """Raised when a function is called with an argument it cannot work with.

    Only the precondition violations that are easy caller mistakes are
    trapped (degenerate remap ranges, short or non-sequence arrays). Other
    degenerate inputs propagate IEEE ``inf``/``nan`` instead of raising.
    """
