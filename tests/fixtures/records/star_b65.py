from bitlayout import *  # noqa: F401,F403


@bitfield  # noqa: F405
class Wide:
    head: B8  # noqa: F405
    body: B65  # noqa: F405
