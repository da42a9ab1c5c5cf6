"""ASCII art for each animation frame."""
from digicat import FrameId

_BODY = r"""
      =====           / /
    /   o  \_________/ /
    |                  |
    |  /\   _____      |
    | |  | |     | | | |
    |_|  |_|     |_| |_|"""

FRAMES: dict[FrameId, str] = {
    FrameId.OPEN: r"""
      /\_/\
     / o o \           _
   >( \_Y_/ )<        | |""" + _BODY,
    FrameId.BLINK: r"""
      /\_/\
     / > < \           _
   >( \_Y_/ )<        | |""" + _BODY,
    FrameId.DEAD: r"""
      /\_/\
     / X X \           _
   >(  _Y_  )<        | |""" + _BODY,
    FrameId.DANCE_RIGHT: r"""
        /\_/\
       / u u \           _
     >( \_Y_/ )<        | |
       =====           / /
     /   o  \_________/ /
     |                  |
     |  /\   _____      |
     | |  |_|     |_| | |
     |_|              |_|""",
    FrameId.DANCE_LEFT: r"""
     /\_/\
    / u u \           _
  >( \_Y_/ )<        | |
     =====           / /
   /   o  \_________/ /
   |                  |
   |  /\   _____      |
   |_|  | |     | | |_|
        |_|     |_|""",
}
