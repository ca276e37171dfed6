'''
Geometry managers: pack (box layout), grid and place (absolute).

  w.pack().sideTop().fillX().pad(4, 4).manage()
  w.grid(row=1, column=0).sticky("ew").manage()

packing order matters: with a full-size list and a scrollbar, pack the scrollbar first
'''
import abc

from .options import kwargsNotNull, tclOptionName

def _args(options:dict) -> list:
  args = []
  for (k, v) in kwargsNotNull(**options).items(): args += [tclOptionName(k), v]
  return args

class LayoutManager(abc.ABC):
  '''arranges widgets in their container'''
  command:str = None
  def __init__(self, app):
    self.app = app
  def add(self, widget, **options) -> "LayoutManager":
    self.app.tclEval(self.command, "configure", widget.path, *_args(options))
    return self
  def remove(self, widget) -> "LayoutManager":
    self.app.tclEval(self.command, "forget", widget.path)
    return self
  def info(self, widget) -> dict:
    fields = self.app.interp.splitList(self.app.tclEval(self.command, "info", widget.path))
    return {k.lstrip("-"): v for (k, v) in zip(fields[0::2], fields[1::2])}
  def slaves(self, container) -> list:
    return list(self.app.interp.splitList(self.app.tclEval(self.command, "slaves", container.path)))

class Pack(LayoutManager):
  command = "pack"
class Place(LayoutManager):
  command = "place"
class Grid(LayoutManager):
  command = "grid"
  def columnConfigure(self, container, index:int, **options):
    self.app.tclEval("grid", "columnconfigure", container.path, index, *_args(options))
  def rowConfigure(self, container, index:int, **options):
    self.app.tclEval("grid", "rowconfigure", container.path, index, *_args(options))

class LayoutBuilder:
  '''collects options for one widget, [manage] hands it to the manager'''
  def __init__(self, manager:LayoutManager, widget, options=None):
    self.manager = manager
    self.widget = widget
    self.options = dict(options or {})
  def set(self, name, value) -> "LayoutBuilder":
    self.options[name] = value; return self
  def manage(self):
    self.manager.add(self.widget, **self.options)
    return self.widget
  def forget(self):
    self.manager.remove(self.widget)
    return self.widget

  def pad(self, x, y) -> "LayoutBuilder": return self.set("padx", x).set("pady", y)
  def padX(self, x) -> "LayoutBuilder": return self.set("padx", x)
  def padY(self, y) -> "LayoutBuilder": return self.set("pady", y)
  def ipad(self, x, y) -> "LayoutBuilder": return self.set("ipadx", x).set("ipady", y)

class PackBuilder(LayoutBuilder):
  def side(self, side:str): return self.set("side", side)
  def sideTop(self): return self.side("top")
  def sideBottom(self): return self.side("bottom")
  def sideLeft(self): return self.side("left")
  def sideRight(self): return self.side("right")
  def fill(self, fill:str): return self.set("fill", fill)
  def fillX(self): return self.fill("x")
  def fillY(self): return self.fill("y")
  def fillBoth(self): return self.fill("both")
  def expand(self, flag=True): return self.set("expand", flag)
  def anchor(self, anchor:str): return self.set("anchor", anchor)
  def before(self, widget): return self.set("before", widget.path)
  def after(self, widget): return self.set("after", widget.path)

class GridBuilder(LayoutBuilder):
  def row(self, row:int): return self.set("row", row)
  def column(self, column:int): return self.set("column", column)
  def sticky(self, sticky:str): return self.set("sticky", sticky)
  def span(self, rows=1, columns=1): return self.set("rowspan", rows).set("columnspan", columns)

class PlaceBuilder(LayoutBuilder):
  def pos(self, x, y): return self.set("x", x).set("y", y)
  def relPos(self, x:float, y:float): return self.set("relx", x).set("rely", y)
  def size(self, width, height): return self.set("width", width).set("height", height)
  def relSize(self, width:float, height:float): return self.set("relwidth", width).set("relheight", height)
  def anchor(self, anchor:str): return self.set("anchor", anchor)
