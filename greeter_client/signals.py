from blinker import Namespace

_signals = Namespace()

channel_opened = _signals.signal("channel-opened")
channel_closed = _signals.signal("channel-closed")
