import re
from typing import Tuple

from .exceptions import TkException

_RE_GEOMETRY = re.compile(r"^(\d+)x(\d+)([+-]-?\d+)([+-]-?\d+)$")

def parseGeometry(code:str) -> Tuple[int, int, int, int]:
  '''WxH+X+Y -> (w, h, x, y)'''
  mch = _RE_GEOMETRY.match(code)
  if mch == None: raise TkException("bad geometry: %r" %code)
  (w, h, x, y) = mch.groups()
  return (int(w), int(h), int(x.replace("+", "", 1)), int(y.replace("+", "", 1)))

class TkWindowManager:
  '''the "wm" command applied to one toplevel window'''
  STATE_NORMAL = "normal"; STATE_ICONIC = "iconic"; STATE_WITHDRAWN = "withdrawn"; STATE_ZOOMED = "zoomed"

  def __init__(self, window):
    self.window = window
  def _wm(self, command, *args) -> str:
    return self.window.app().tclEval("wm", command, self.window.path, *args)
  def _intPair(self, code) -> Tuple[int, int]:
    (a, b) = self.window.app().interp.splitList(code)
    return (int(a), int(b))

  def setTitle(self, title:str): self._wm("title", title)
  def getTitle(self) -> str: return self._wm("title")

  def setState(self, state:str):
    '''normal, iconic, withdrawn, icon, zoomed; some depend on the window system'''
    self._wm("state", state)
  def getState(self) -> str: return self._wm("state")
  def iconify(self): self._wm("iconify")
  def deiconify(self): self._wm("deiconify")

  def setMaxSize(self, width:int, height:int): self._wm("maxsize", width, height)
  def getMaxSize(self) -> Tuple[int, int]: return self._intPair(self._wm("maxsize"))
  def setMinSize(self, width:int, height:int): self._wm("minsize", width, height)
  def getMinSize(self) -> Tuple[int, int]: return self._intPair(self._wm("minsize"))

  def setAttribute(self, attribute:str, value): self._wm("attributes", "-" + attribute, value)
  def getAttribute(self, attribute:str) -> str: return self._wm("attributes", "-" + attribute)
  def setFullScreen(self): self.setAttribute("fullscreen", True)

  def setSize(self, width:int, height:int): self._wm("geometry", "%dx%d" %(width, height))
  def getSize(self) -> Tuple[int, int]: return parseGeometry(self._wm("geometry"))[0:2]
  def setPos(self, x:int, y:int): self._wm("geometry", "%+d%+d" %(x, y))
  def getPos(self) -> Tuple[int, int]: return parseGeometry(self._wm("geometry"))[2:4]

  def getScreenSize(self) -> Tuple[int, int]:
    app = self.window.app()
    return (int(app.tclEval("winfo", "screenwidth", self.window.path)), int(app.tclEval("winfo", "screenheight", self.window.path)))
