import logging
from enum import Enum
from typing import Callable, Optional, Union

from .bindings import TkBindings
from .exceptions import TclException, TclInterpException, TkException
from .fonts import TkFontManager
from .tcl import Interp, Tk, Variable, encloseArg
from .themes import TkThemeManager
from .utils import EventCallback

logger = logging.getLogger(__name__)

CALLBACK_HANDLER = "PyTkui_Handler"
DESTROY_HANDLER = "PyTkui_Destroyed"

class GuiType(Enum):
  X11 = "x11"
  WIN32 = "win32"
  AQUA = "aqua"
  @staticmethod
  def fromString(name:str) -> "GuiType":
    try: return GuiType(name)
    except ValueError: raise TkException("unknown windowing system: %s" %name) from None

class Timeout:
  '''a one-shot [TkApplication.after] timer'''
  def __init__(self, app:"TkApplication", after_ms:int, op:Callable):
    self.app = app
    self.op = op
    self.command = "PyTkui_After%d" %id(self)
    def fire():
      self.app.interp.deleteCommand(self.command)
      self._id = None
      op()
    app.interp.createCommand(self.command, fire)
    self._id = app.tclEval("after", after_ms, self.command)
  @property
  def isPending(self): return self._id != None
  def cancel(self):
    """Prevent this timeout from running as scheduled."""
    if self._id == None: return
    self.app.tclEval("after", "cancel", self._id)
    self.app.interp.deleteCommand(self.command)
    self._id = None

class TkApplication:
  '''
  The application: owns the interpreter, the callback table and the variable registry.
  Widgets reach Tcl only through [tclEval] here.
  '''
  def __init__(self, tk:Tk, argv=None):
    self._tk = tk
    self.interp:Interp = tk.interp()
    self._argv = dict(argv or {})
    self._bindings = self.createBindings()
    self._themeManager:Optional[TkThemeManager] = None
    self._fontManager = self.createFontManager()
    self._vars = {}
    self._callbacks = {} # path -> (widget, op)
    self._widgets = {} # path -> live widget
    self._widgetIds = 0
    self.onQuit = EventCallback("onQuit")
    self.createCallbackHandler()
    self.interp.createCommand(DESTROY_HANDLER, self._widgetDestroyed)

  def createBindings(self) -> TkBindings: return TkBindings(self.interp)
  def createFontManager(self) -> TkFontManager: return TkFontManager(self)
  def createThemeManager(self) -> TkThemeManager: return TkThemeManager(self)

  def tclEval(self, *args) -> str:
    '''joins the encoded [args] into one script and evaluates it, returning the string result'''
    script = " ".join(encloseArg(arg) for arg in args)
    self.interp.eval(script)
    return self.interp.getStringResult()

  def initTtk(self):
    try:
      self.interp.eval("package require Ttk")
      self._themeManager = self.createThemeManager()
    except TclInterpException as e:
      self._themeManager = None
      logger.error("initTtk: %s", e)
  def hasTtk(self) -> bool: return self._themeManager != None
  def getThemeManager(self) -> TkThemeManager:
    if self.hasTtk(): return self._themeManager
    raise TkException("ttk is not supported.")

  def init(self):
    logger.debug("app init")
    self.interp.init()
    self.setInterpArgv()
    self._tk.init()
    self.initTtk()
    # every widget carries the "all" tag, user bindings on paths never replace this one
    self.interp.eval("bind all <Destroy> +{%s %%W}" %DESTROY_HANDLER)
    logger.debug("end app init")
  def setInterpArgv(self):
    for (arg, value) in self._argv.items(): self.interp.argv().append(arg, value)

  def run(self):
    '''the main loop, processes all app events until the root window is destroyed'''
    logger.debug("run")
    self._tk.mainLoop()
  def quit(self):
    '''quits the application and deletes all the widgets'''
    logger.debug("destroy")
    self.tclEval("destroy", ".")
  def update(self): self.tclEval("update", "idletasks")
  def tk(self) -> Tk: return self._tk

  def bindWidget(self, widget, event:str, op):
    self._bindings.bindWidget(widget, event, op)
  def unbindWidget(self, widget, event:str):
    self._bindings.unbindWidget(widget, event)
  def bindings(self) -> TkBindings: return self._bindings

  def createCallbackHandler(self):
    self.interp.createCommand(CALLBACK_HANDLER, self._dispatchCallback)
  def _dispatchCallback(self, *args):
    if len(args) == 0: raise TclException("%s: missing widget path" %CALLBACK_HANDLER)
    (path, rest) = (args[0], args[1:])
    try: (widget, op) = self._callbacks[path]
    except KeyError: raise TclException("no callback registered for %s" %path) from None
    return op(widget, *rest)

  def registerCallback(self, widget, op:Callable, args=()) -> str:
    '''stores [op] for the widget (replacing any earlier one), returns the Tcl command that calls it'''
    self._callbacks[widget.path] = (widget, op)
    return " ".join([CALLBACK_HANDLER, widget.path] + [str(it) for it in args]).strip()
  def unregisterCallback(self, widget):
    self._callbacks.pop(widget.path, None)
  def hasCallback(self, widget) -> bool: return widget.path in self._callbacks

  @staticmethod
  def _varName(var) -> str: return var if isinstance(var, str) else var.path
  def registerVar(self, var:Union["Widget", str]) -> Variable:
    name = self._varName(var)
    if name not in self._vars: self._vars[name] = self.interp.createVariable(name)
    return self._vars[name]
  def unregisterVar(self, var:Union["Widget", str]):
    name = self._varName(var)
    if name not in self._vars: raise TclException('Variable "%s" is not registered.' %name)
    self._vars.pop(name).unset()
  def hasVar(self, var) -> bool: return self._varName(var) in self._vars

  def registerWidget(self, widget):
    self._widgets[widget.path] = widget
  def unregisterWidget(self, widget):
    if self._widgets.get(widget.path) is widget: del self._widgets[widget.path]
  def findWidget(self, path:str):
    '''the live widget at [path], None when it's destroyed or not made by tkui'''
    return self._widgets.get(path)
  def _widgetDestroyed(self, path:str):
    widget = self._widgets.get(path)
    if widget != None:
      logger.debug("destroyed %s", path)
      widget._detach(self)
    if path == ".": self.onQuit.run()

  def nextWidgetName(self, prefix:str) -> str:
    self._widgetIds += 1
    return "%s%d" %(prefix, self._widgetIds)

  def after(self, after_ms:int, op:Callable) -> Timeout: return Timeout(self, after_ms, op)
  def afterCancel(self, timeout:Timeout): timeout.cancel()

  def getFontManager(self) -> TkFontManager: return self._fontManager
  def getGuiType(self) -> GuiType:
    return GuiType.fromString(str(self.tclEval("tk", "windowingsystem")))
  def setScaling(self, value:float) -> "TkApplication":
    self.tclEval("tk", "scaling", value)
    return self
  def getScaling(self) -> float:
    return float(self.tclEval("tk", "scaling"))
