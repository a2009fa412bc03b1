"""
Protocols between the core and its host
"""

from ping_pong.core.interfaces.host import HostContext
from ping_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["HostContext", "RendererProtocol"]
