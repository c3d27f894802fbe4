from .w3cx11 import W3CX11, hex_for_name, name_for_hex

__all__ = ["W3CX11", "hex_for_name", "name_for_hex"]
