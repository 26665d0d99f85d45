"""Typed Model-View-Controller core.

Three roles connected by named-event dispatch and a one-way render channel:

- mvc.event_map: TypedDict event maps and handler-table validation
- mvc.model: Model protocol, HandlerTable, BaseModel
- mvc.view: View protocol, CallbackRegistry, BaseView
- mvc.controller: Controller protocol, RenderChannel, BaseController
"""

from mvc.errors import HandlerNotFoundError, HandlerTableError, MVCError
from mvc.event_map import EventMap, check_callback, check_handler_table, event_names, event_signatures
from mvc.model import BaseModel, HandlerTable, Model
from mvc.view import BaseView, CallbackRegistry, View
from mvc.controller import BaseController, Controller, ControllerState, RenderChannel

__all__ = [
    # Errors
    "MVCError",
    "HandlerNotFoundError",
    "HandlerTableError",
    # Event maps
    "EventMap",
    "check_callback",
    "check_handler_table",
    "event_names",
    "event_signatures",
    # Model
    "Model",
    "HandlerTable",
    "BaseModel",
    # View
    "View",
    "CallbackRegistry",
    "BaseView",
    # Controller
    "Controller",
    "ControllerState",
    "RenderChannel",
    "BaseController",
]
