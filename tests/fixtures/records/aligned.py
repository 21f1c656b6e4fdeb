from bitlayout import B1, B3, B4, B8, B16, B24, bitfield


@bitfield
class Header:
    flag: B1
    kind: B3
    version: B4


@bitfield
class Frame:
    length: B16
    checksum: B8
    payload_offset: B24


class NotARecord:
    width: int = 3
