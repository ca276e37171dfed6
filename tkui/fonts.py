from typing import NamedTuple

class Font(NamedTuple):
  family: str
  size: int
  weight: str = "normal"
  slant: str = "roman"
  underline: bool = False
  overstrike: bool = False

  def asOptions(self) -> list:
    return ["-family", self.family, "-size", self.size, "-weight", self.weight, "-slant", self.slant,
      "-underline", self.underline, "-overstrike", self.overstrike]

class TkFontManager:
  '''named fonts: TkDefaultFont, TkTextFont, TkFixedFont, ... plus the ones created here'''
  DEFAULT = "TkDefaultFont"; TEXT = "TkTextFont"; FIXED = "TkFixedFont"
  def __init__(self, app):
    self.app = app

  def families(self) -> list:
    return list(self.app.interp.splitList(self.app.tclEval("font", "families")))
  def names(self) -> list:
    return list(self.app.interp.splitList(self.app.tclEval("font", "names")))

  def actual(self, name:str) -> Font:
    fields = self.app.interp.splitList(self.app.tclEval("font", "actual", name))
    opts = dict(zip(fields[0::2], fields[1::2]))
    flag = lambda k: opts.get(k, "0") in ("1", "true")
    return Font(opts["-family"], int(opts["-size"]), opts.get("-weight", "normal"), opts.get("-slant", "roman"),
      flag("-underline"), flag("-overstrike"))
  def getDefaultFont(self) -> Font: return self.actual(TkFontManager.DEFAULT)
  def getFixedFont(self) -> Font: return self.actual(TkFontManager.FIXED)

  def createFont(self, name:str, font:Font) -> str:
    return self.app.tclEval("font", "create", name, *font.asOptions())
  def deleteFont(self, name:str):
    self.app.tclEval("font", "delete", name)
  def measure(self, name:str, text:str) -> int:
    return int(self.app.tclEval("font", "measure", name, text))
