"""panquery — read-only query layer over pangenome variation graphs."""

__version__ = "0.3.0"
