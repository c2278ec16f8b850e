"""Decoding subsystem for selection-list.

Builds an unselected Selection from a sequence (or JSON array) of encoded
elements::

    from selection_list.decoding import decoder

    decoder(int).decode_json("[1, 2, 3]", selected=2)
"""

from selection_list.decoding.decoder import MISSING, SelectionDecoder, decoder

__all__ = [
    "MISSING",
    "SelectionDecoder",
    "decoder",
]
