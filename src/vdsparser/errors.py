# -------------------------------------
# errors
# -------------------------------------


class GrammarError(ValueError):
    """A grammar, range bound or registry file that cannot be used as written."""
    pass
