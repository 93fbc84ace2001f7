"""Nucleotide helpers."""

from __future__ import annotations

# IUPAC codes complement to their IUPAC partner; anything unknown maps to N.
_COMPLEMENT = str.maketrans(
    "ACGTUMRWSYKVHDBNacgtumrwsykvhdbn",
    "TGCAAKYWSRMBDHVNtgcaakywsrmbdhvn",
)


def reverse_complement(seq: str) -> str:
    """Return the reverse complement of a nucleotide sequence.

    Case is preserved. Characters outside the IUPAC alphabet pass
    through unchanged.
    """
    return seq.translate(_COMPLEMENT)[::-1]
