class PackageSpecError(ValueError):
    """A manifest entry that cannot be turned into a package tuple."""
