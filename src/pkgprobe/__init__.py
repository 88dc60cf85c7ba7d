"""pkgprobe - verify package availability in a distribution repository."""

__version__ = "0.1.0"
