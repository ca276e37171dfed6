'''
Application settings from the environment:
  TKUI_THEME     ttk theme name, "auto" picks the OS default
  TKUI_SCALING   tk scaling factor (pixels per point)
  TKUI_DEBUG     1/true/yes/on turns on DEBUG logging for tkui
  TKUI_LOG_FILE  also write tkui logs to this file
'''
import logging
import os
from typing import Mapping, Optional

from .app import TkApplication
from .exceptions import TclException, UnsupportedOSException
from .system import detect as detectOS
from .tcl import Interp, Tk

logger = logging.getLogger(__name__)

ENV_THEME = "TKUI_THEME"
ENV_SCALING = "TKUI_SCALING"
ENV_DEBUG = "TKUI_DEBUG"
ENV_LOG_FILE = "TKUI_LOG_FILE"
THEME_AUTO = "auto"

def _isTrue(v:Optional[str]) -> bool:
  return v != None and v.strip().lower() in ("1", "true", "yes", "on")

class AppConfig:
  def __init__(self, theme:Optional[str]=None, scaling:Optional[float]=None, debug=False, logFile:Optional[str]=None):
    self.theme = theme
    self.scaling = scaling
    self.debug = debug
    self.logFile = logFile
  def __repr__(self):
    return "AppConfig(theme=%r, scaling=%r, debug=%r, logFile=%r)" %(self.theme, self.scaling, self.debug, self.logFile)

  @staticmethod
  def fromEnv(env:Mapping[str, str]=None) -> "AppConfig":
    env = os.environ if env == None else env
    scaling = env.get(ENV_SCALING)
    try: scalingValue = float(scaling) if scaling else None
    except ValueError: raise ValueError("%s is not a number: %r" %(ENV_SCALING, scaling)) from None
    return AppConfig(env.get(ENV_THEME) or None, scalingValue, _isTrue(env.get(ENV_DEBUG)), env.get(ENV_LOG_FILE) or None)

  def resolveTheme(self) -> Optional[str]:
    if self.theme != THEME_AUTO: return self.theme
    try: return detectOS().defaultTheme
    except UnsupportedOSException as e:
      logger.error("no default theme: %s", e)
      return None

  def setupLogging(self):
    pkgLogger = logging.getLogger("tkui")
    if self.debug: pkgLogger.setLevel(logging.DEBUG)
    if self.logFile != None and not any(isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(self.logFile) for h in pkgLogger.handlers):
      handler = logging.FileHandler(self.logFile)
      handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s"))
      pkgLogger.addHandler(handler)

class AppFactory:
  '''builds and initializes a [TkApplication] following an [AppConfig]'''
  def __init__(self, config:AppConfig=None):
    self.config = config or AppConfig.fromEnv()

  def createApp(self, argv=None) -> TkApplication:
    interp = Interp()
    return TkApplication(Tk(interp), argv)

  def create(self, argv=None) -> TkApplication:
    self.config.setupLogging()
    app = self.createApp(argv)
    app.init()
    if self.config.scaling != None: app.setScaling(self.config.scaling)
    theme = self.config.resolveTheme()
    if theme != None and app.hasTtk():
      try: app.getThemeManager().useTheme(theme)
      except TclException as e: logger.error("theme %s: %s", theme, e)
    return app
