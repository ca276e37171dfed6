'''
Widgets are rows of [WIDGET_KINDS] (Tk command, path prefix, declared options)
plus capability mixins, so each leaf class only picks its row and its mixins.

Options are accessible as w["text"] or w.text, both read the local option bag
(unset and [runtimeOptions] come from "path cget") and write through "path configure".
A widget destroyed by Tk itself, e.g. a toplevel closed by the window manager,
is released through the app's <Destroy> handler.
Callbacks receive the widget first: button.onClick(lambda btn: ...)
'''
from typing import Callable, Dict, NamedTuple, Optional, Tuple

from .exceptions import OptionNotFoundException, TkException
from .layouts import Grid, GridBuilder, Pack, PackBuilder, Place, PlaceBuilder
from .options import Options, tclOptionName
from .tcl import Variable, quoteString, strList
from .wm import TkWindowManager

class WidgetKind(NamedTuple):
  command: str
  prefix: str
  options: Tuple[str, ...] = ()
  defaults: Dict[str, object] = {}

COMMON_OPTIONS = ("cursor", "style", "takeFocus")

WIDGET_KINDS = {
  "frame": WidgetKind("ttk::frame", "f", ("borderWidth", "relief", "padding", "width", "height")),
  "labelframe": WidgetKind("ttk::labelframe", "lbf", ("text", "labelAnchor", "underline", "padding", "width", "height")),
  "label": WidgetKind("ttk::label", "lb", ("text", "textVariable", "image", "compound", "anchor", "justify",
    "wrapLength", "font", "foreground", "background", "padding", "width", "underline", "state")),
  "button": WidgetKind("ttk::button", "b", ("text", "textVariable", "command", "default", "image", "compound",
    "width", "underline", "state")),
  "checkbutton": WidgetKind("ttk::checkbutton", "chk", ("text", "variable", "onValue", "offValue", "command",
    "state", "underline", "width")),
  "radiobutton": WidgetKind("ttk::radiobutton", "rb", ("text", "variable", "value", "command", "state", "underline", "width")),
  "entry": WidgetKind("ttk::entry", "e", ("font", "foreground", "xScrollCommand", "exportSelection", "invalidCommand",
    "justify", "show", "state", "textVariable", "validate", "validateCommand", "width")),
  "combobox": WidgetKind("ttk::combobox", "cb", ("exportSelection", "font", "height", "justify", "postCommand",
    "state", "textVariable", "values", "width")),
  "scrollbar": WidgetKind("ttk::scrollbar", "sb", ("command", "orient")),
  "panedwindow": WidgetKind("ttk::panedwindow", "pw", ("orient", "width", "height")),
  "separator": WidgetKind("ttk::separator", "sep", ("orient",), {"orient": "horizontal"}),
  "sizegrip": WidgetKind("ttk::sizegrip", "sg"),
  "progressbar": WidgetKind("ttk::progressbar", "pb", ("orient", "length", "mode", "maximum", "value", "variable")),
  "notebook": WidgetKind("ttk::notebook", "nb", ("width", "height", "padding")),
  "toplevel": WidgetKind("toplevel", "w", ("background", "menu", "width", "height", "padx", "pady")),
}

class Widget:
  kind:WidgetKind = None
  # options Tk changes on its own, always read back with cget
  runtimeOptions = ("state",)

  def __init__(self, parent:Optional["Widget"], options=None, **kwargs):
    self.parent = parent
    self.children = []
    self._isDestroyed = False
    self.options = self.initOptions()
    self.options.update(options or {})
    self.options.update(kwargs)
    self.path = self.makePath()
    if parent != None: parent.children.append(self)
    self.make()
    self.app().registerWidget(self)

  def initOptions(self) -> Options:
    declared = dict.fromkeys(COMMON_OPTIONS + self.kind.options)
    declared.update(self.kind.defaults)
    return Options(declared, type(self).__name__)
  def makePath(self) -> str:
    name = self.app().nextWidgetName(self.kind.prefix)
    return ("." if self.parent.path == "." else self.parent.path + ".") + name
  def make(self):
    self.app().tclEval(self.kind.command, self.path, *self.options.asStringArray(self._encodeOption))

  def __str__(self): return self.path
  def __repr__(self): return "%s(%s)" %(type(self).__name__, self.path)

  def app(self): return self.parent.app()
  def window(self) -> "Window": return self.parent.window()
  @property
  def isDestroyed(self): return self._isDestroyed

  def _encodeOption(self, value):
    if isinstance(value, (Variable, Widget)): return str(value)
    if callable(value): return self.app().registerCallback(self, value)
    if isinstance(value, (list, tuple)): return strList(value)
    return value

  def call(self, method:str, *args) -> str:
    '''path method args...'''
    if self._isDestroyed: raise TkException("%s is destroyed" %self.path)
    return self.app().tclEval(self.path, method, *args)

  def __getitem__(self, name):
    v = self.options[name]
    if v == None or name in self.runtimeOptions: return self.call("cget", tclOptionName(name))
    return v
  def __setitem__(self, name, value): self.configure(**{name: value})
  def configure(self, **kwargs):
    '''one "path configure" for all of [kwargs], the option bag changes only when Tk accepts them'''
    args = []
    for (name, v) in kwargs.items():
      if name not in self.options: raise OptionNotFoundException(name, self.options.owner)
      args += [tclOptionName(name), self._encodeOption(v)]
    if args: self.call("configure", *args)
    self.options.update(kwargs)
    return self

  def __getattr__(self, name):
    options = self.__dict__.get("options")
    if options != None and name in options: return self[name]
    raise AttributeError("%r has no attribute or option %r" %(type(self).__name__, name))
  def __setattr__(self, name, value):
    options = self.__dict__.get("options")
    if options != None and name in options and not hasattr(type(self), name) and name not in self.__dict__:
      self[name] = value
    else: super().__setattr__(name, value)

  def bind(self, event:str, op):
    self.app().bindWidget(self, event, op); return self
  def unbind(self, event:str):
    self.app().unbindWidget(self, event); return self
  def focus(self): self.app().tclEval("focus", self.path)
  def exists(self) -> bool:
    return not self._isDestroyed and self.app().tclEval("winfo", "exists", self.path) == "1"

  def pack(self, **options) -> PackBuilder: return PackBuilder(Pack(self.app()), self, options)
  def grid(self, **options) -> GridBuilder: return GridBuilder(Grid(self.app()), self, options)
  def place(self, **options) -> PlaceBuilder: return PlaceBuilder(Place(self.app()), self, options)

  def destroy(self):
    '''destroys the Tk widget, this also invalidates all descendants'''
    if self._isDestroyed: return
    app = self.app()
    app.tclEval("destroy", self.path)
    self._detach(app)
  def _detach(self, app):
    '''forgets a widget whose Tk window is gone, along with its subtree'''
    self._release(app)
    if self.parent != None and self in self.parent.children: self.parent.children.remove(self)
  def _release(self, app):
    if self._isDestroyed: return
    for child in self.children: child._release(app)
    self.children = []
    app.unregisterWidget(self)
    app.unregisterCallback(self)
    app.bindings().unbindAll(self)
    if app.hasVar(self): app.unregisterVar(self)
    self._isDestroyed = True

# capabilities
class Valuable:
  def getValue(self): raise NotImplementedError("getValue")
  def setValue(self, value): raise NotImplementedError("setValue")

class Editable:
  def clear(self): raise NotImplementedError("clear")
  def append(self, text:str): raise NotImplementedError("append")
  def getContent(self) -> str: raise NotImplementedError("getContent")

class Commandable:
  def onClick(self, op:Callable):
    '''op(widget) is called when the widget is invoked'''
    self["command"] = op; return self
  def invoke(self): return self.call("invoke")

class Orientable:
  ORIENT_HORIZONTAL = "horizontal"
  ORIENT_VERTICAL = "vertical"

class HasScrollBars:
  def xScrollBar(self, bar:"Scrollbar"):
    self["xScrollCommand"] = "%s set" %bar.path
    bar["command"] = "%s xview" %self.path
    return self
  def yScrollBar(self, bar:"Scrollbar"):
    self["yScrollCommand"] = "%s set" %bar.path
    bar["command"] = "%s yview" %self.path
    return self

class _OwnVariable:
  '''registers a variable named after the widget path unless [varOption] was given'''
  varOption = "variable"
  def _ensureVariable(self):
    var = self.options[self.varOption]
    if var == None: self[self.varOption] = self.app().registerVar(self)
    elif isinstance(var, str): self.options[self.varOption] = self.app().registerVar(var)
  @property
  def variable(self) -> Variable: return self.options[self.varOption]
  @variable.setter
  def variable(self, var):
    '''binds another Variable, a name is registered first'''
    self[self.varOption] = self.app().registerVar(var) if isinstance(var, str) else var

# leaf widgets
class Frame(Widget):
  kind = WIDGET_KINDS["frame"]

class LabelFrame(Widget):
  kind = WIDGET_KINDS["labelframe"]
  def __init__(self, parent, text="", options=None, **kwargs):
    super().__init__(parent, options, text=text, **kwargs)

class Label(Widget):
  kind = WIDGET_KINDS["label"]
  def __init__(self, parent, text="", options=None, **kwargs):
    super().__init__(parent, options, text=text, **kwargs)

class Button(Commandable, Widget):
  kind = WIDGET_KINDS["button"]
  def __init__(self, parent, text="", options=None, **kwargs):
    super().__init__(parent, options, text=text, **kwargs)

class CheckButton(_OwnVariable, Valuable, Commandable, Widget):
  kind = WIDGET_KINDS["checkbutton"]
  def __init__(self, parent, text="", checked=False, options=None, **kwargs):
    super().__init__(parent, options, text=text, **kwargs)
    self._ensureVariable()
    self.setValue(checked)
  def getValue(self) -> bool:
    return self.variable.asString() == str(self.options["onValue"] or "1")
  def setValue(self, checked:bool):
    self.variable.set((self.options["onValue"] or "1") if checked else (self.options["offValue"] or "0"))
    return self

class RadioButton(Valuable, Commandable, Widget):
  '''buttons of one group share [variable], each with its own [value]'''
  kind = WIDGET_KINDS["radiobutton"]
  def __init__(self, parent, text, variable:Variable, value, options=None, **kwargs):
    super().__init__(parent, options, text=text, variable=variable, value=value, **kwargs)
  def getValue(self) -> bool: return self.options["variable"].asString() == str(self.options["value"])
  def setValue(self, selected:bool):
    if selected: self.options["variable"].set(self.options["value"])
    return self

class Entry(_OwnVariable, Valuable, Editable, HasScrollBars, Widget):
  kind = WIDGET_KINDS["entry"]
  varOption = "textVariable"
  def __init__(self, parent, value="", options=None, **kwargs):
    super().__init__(parent, options, **kwargs)
    self._ensureVariable()
    if value != "": self.setValue(value)

  def getValue(self) -> str: return self.variable.asString()
  def setValue(self, value):
    self.variable.set(value); return self
  def delete(self, first, last=None):
    if last != None: self.call("delete", first, last)
    else: self.call("delete", first)
    return self
  def insert(self, index, text:str):
    '''inserts just before the character at [index]'''
    self.call("insert", index, quoteString(text)); return self
  def insertCursor(self, index):
    self.call("icursor", index); return self
  def onValidate(self, op:Callable[[str], bool], when="key"):
    '''op(newValue) -> accept?'''
    self["validate"] = when
    self["validateCommand"] = self.app().registerCallback(self, lambda w, value: bool(op(value)), ("%P",))
    return self

  def clear(self):
    self.variable.set(""); return self
  def append(self, text:str): return self.insert("end", text)
  def getContent(self) -> str: return self.getValue()

class Combobox(_OwnVariable, Valuable, Widget):
  kind = WIDGET_KINDS["combobox"]
  varOption = "textVariable"
  SELECTED = "<<ComboboxSelected>>"
  def __init__(self, parent, values=(), options=None, **kwargs):
    super().__init__(parent, options, values=list(values), **kwargs)
    self._ensureVariable()

  def getValue(self) -> str: return self.variable.asString()
  def setValue(self, value):
    self.variable.set(value); return self
  def getSelection(self) -> int:
    '''index of the current value in [values], -1 when it's not one of them'''
    return int(self.call("current"))
  def setSelection(self, index:int):
    self.call("current", index); return self
  def onSelect(self, op:Callable[[int], object]):
    return self.bind(Combobox.SELECTED, lambda ev: op(self.getSelection()))

class Scrollbar(Orientable, Widget):
  kind = WIDGET_KINDS["scrollbar"]
  def __init__(self, parent, vertical=True, options=None, **kwargs):
    super().__init__(parent, options, orient=Orientable.ORIENT_VERTICAL if vertical else Orientable.ORIENT_HORIZONTAL, **kwargs)
  def set(self, first:float, last:float): self.call("set", first, last)
  def get(self) -> Tuple[float, float]:
    (first, last) = self.app().interp.splitList(self.call("get"))
    return (float(first), float(last))

class PanedWindow(Orientable, Widget):
  kind = WIDGET_KINDS["panedwindow"]
  def add(self, widget:Widget, **options):
    args = []
    for (k, v) in options.items(): args += [tclOptionName(k), v]
    self.call("add", widget.path, *args); return self
  def forget(self, widget:Widget):
    self.call("forget", widget.path); return self
  def panes(self) -> list: return list(self.app().interp.splitList(self.call("panes")))

class Separator(Orientable, Widget):
  kind = WIDGET_KINDS["separator"]

class Sizegrip(Widget):
  '''a grow box for resizing the containing toplevel'''
  kind = WIDGET_KINDS["sizegrip"]

class ProgressBar(Valuable, Orientable, Widget):
  kind = WIDGET_KINDS["progressbar"]
  runtimeOptions = ("state", "value")
  def getValue(self) -> float: return float(self.call("cget", "-value"))
  def setValue(self, value:float):
    self["value"] = value; return self
  def step(self, amount:float=1.0): self.call("step", amount)

class Notebook(Widget):
  kind = WIDGET_KINDS["notebook"]
  def add(self, widget:Widget, text:str=""):
    self.call("add", widget.path, "-text", text); return self
  def select(self, widget:Widget): self.call("select", widget.path)
  def tabs(self) -> list: return list(self.app().interp.splitList(self.call("tabs")))

class Window(Widget):
  '''a toplevel window, owns the "wm" facade'''
  kind = WIDGET_KINDS["toplevel"]
  def __init__(self, app, title:str="", options=None, **kwargs):
    self._app = app
    self._wm = None
    super().__init__(None, options, **kwargs)
    if title: self.wm().setTitle(title)
  def app(self): return self._app
  def window(self) -> "Window": return self
  def makePath(self) -> str: return "." + self._app.nextWidgetName(self.kind.prefix)
  def wm(self) -> TkWindowManager:
    if self._wm == None: self._wm = TkWindowManager(self)
    return self._wm
  def run(self): self._app.run()
  def close(self): self.destroy()

class MainWindow(Window):
  '''the root window "."; it exists as soon as Tk is loaded, so options are configured, not created'''
  def makePath(self) -> str: return "."
  def make(self):
    args = self.options.asStringArray(self._encodeOption)
    if args: self._app.tclEval(".", "configure", *args)
  def close(self): self._app.quit()
  def destroy(self):
    if self._isDestroyed: return
    self._app.quit()
    self._release(self._app)
