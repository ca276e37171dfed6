import importlib
import logging
from typing import NamedTuple

from .exceptions import TkException

logger = logging.getLogger(__name__)

class BackendEnum(NamedTuple):
  '''a ttk theme provider, usable when [moduleName] imports'''
  name: str
  moduleName: str
  def isAvailable(self) -> bool:
    try: importlib.import_module(self.moduleName)
    except ImportError: return False
    return True

class Backend:
  '''theme providers, ThemedTk adds the ttkthemes collection on top of the built-in ttk themes'''
  TTk = BackendEnum("ttk", "tkinter.ttk")
  ThemedTk = BackendEnum("themedtk", "ttkthemes")
  fallbackOrder = [ThemedTk, TTk]
  @staticmethod
  def detect() -> BackendEnum:
    return next(filter(BackendEnum.isAvailable, Backend.fallbackOrder))

class TkThemeManager:
  def __init__(self, app, backend:BackendEnum=None):
    self.app = app
    self.backend = backend or Backend.detect()
    self._themedStyle = None
    logger.debug("theme backend: %s", self.backend.name)

  def _themed(self):
    '''the ttkthemes style object, it registers its theme packages in the interpreter when created'''
    if self.backend != Backend.ThemedTk: return None
    if self._themedStyle == None:
      from ttkthemes import ThemedStyle
      self._themedStyle = ThemedStyle(master=self.app.tk().interp().root)
    return self._themedStyle

  def builtinThemes(self) -> list:
    return list(self.app.interp.splitList(self.app.tclEval("ttk::style", "theme", "names")))
  def themes(self) -> list:
    names = self.builtinThemes()
    themed = self._themed()
    if themed != None: names += [it for it in themed.get_themes() if it not in names]
    return names

  def currentTheme(self) -> str:
    return self.app.tclEval("return", "$ttk::currentTheme")
  def useTheme(self, name:str) -> "TkThemeManager":
    if name in self.builtinThemes():
      self.app.tclEval("ttk::style", "theme", "use", name)
    elif self._themed() != None and name in self._themed().get_themes():
      self._themed().set_theme(name)
    else: raise TkException("unknown theme: %s" %name)
    logger.debug("theme: %s", name)
    return self

  def configure(self, style:str, **options):
    args = []
    for (k, v) in options.items(): args += ["-" + k, v]
    self.app.tclEval("ttk::style", "configure", style, *args)
  def lookup(self, style:str, option:str, default=None) -> str:
    res = self.app.tclEval("ttk::style", "lookup", style, "-" + option)
    return res if res != "" or default == None else default
