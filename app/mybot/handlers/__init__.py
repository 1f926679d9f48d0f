# -*- coding: utf-8 -*-

from .message_handler import handle_message, route_message

__all__ = ["handle_message", "route_message"]
