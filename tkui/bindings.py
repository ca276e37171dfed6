import logging
from typing import Any, Callable, NamedTuple, Optional

from .exceptions import TclException

logger = logging.getLogger(__name__)

BINDINGS_HANDLER = "PyTkui_Bindings"
# x y rootX rootY button keycode keysym widget delta
EVENT_SUBSTITUTIONS = "%x %y %X %Y %b %k %K %W %D"

def eventName(name:str) -> str:
  '''Enter -> <Enter>, already bracketed names are kept'''
  return name if name.startswith("<") else "<%s>" %name

class Events:
  click = "<Button-1>"
  doubleClick = "<Double-Button-1>"
  mouseM = "<Button-2>"
  mouseR = "<Button-3>"
  key = "<Key>"
  enter = "<Enter>"; leave = "<Leave>"
  focusIn = "<FocusIn>"; focusOut = "<FocusOut>"
  destroy = "<Destroy>"
  configure = "<Configure>"

def _intOrNone(s:str) -> Optional[int]:
  try: return int(s)
  except ValueError: return None

class Event(NamedTuple):
  x: Optional[int] = None
  y: Optional[int] = None
  rootX: Optional[int] = None
  rootY: Optional[int] = None
  button: Optional[int] = None
  keycode: Optional[int] = None
  keysym: Optional[str] = None
  widgetPath: Optional[str] = None
  delta: Optional[int] = None

  @staticmethod
  def parse(fields) -> "Event":
    '''builds from the substituted %-fields, "??" means the field does not apply to this event'''
    vals = [None if it in ("??", "") else it for it in fields]
    vals += [None] * (len(Event._fields) - len(vals))
    (x, y, rx, ry, b, k, ksym, w, d) = vals[:len(Event._fields)]
    num = lambda s: None if s == None else _intOrNone(s)
    return Event(num(x), num(y), num(rx), num(ry), num(b), num(k), ksym, w, num(d))

class TkBindings:
  '''widget event bindings, dispatched by one Tcl command keyed with (path, event)'''
  def __init__(self, interp):
    self.interp = interp
    self._handlers = {}
    self.interp.createCommand(BINDINGS_HANDLER, self._handle)

  def _handle(self, path, event, *fields):
    handler = self._handlers.get((path, event))
    if handler == None: raise TclException("no binding for %s %s" %(path, event))
    (widget, op) = handler
    op(Event.parse(fields))

  def bindWidget(self, widget, event:str, op:Callable[[Event], Any]):
    ev = eventName(event)
    logger.debug("bind %s %s", widget.path, ev)
    self._handlers[(widget.path, ev)] = (widget, op)
    self.interp.eval("bind %s %s {%s %s %s %s}" %(widget.path, ev, BINDINGS_HANDLER, widget.path, ev, EVENT_SUBSTITUTIONS))
  def unbindWidget(self, widget, event:str):
    ev = eventName(event)
    self._handlers.pop((widget.path, ev), None)
    self.interp.eval("bind %s %s {}" %(widget.path, ev))
  def unbindAll(self, widget):
    '''forgets every handler of a destroyed [widget], Tk already dropped its bindings'''
    for key in [k for k in self._handlers if k[0] == widget.path]: del self._handlers[key]
  def isBound(self, widget, event:str) -> bool: return (widget.path, eventName(event)) in self._handlers
