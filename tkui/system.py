from platform import system as platformName
from subprocess import call as startSubProcess
import os

from .exceptions import UnsupportedOSException

class OS:
  name = None
  defaultTheme = "default"
  def startFile(self, path:str):
    '''opens [path] with the desktop's handler for it'''
    raise NotImplementedError("startFile")
  def __repr__(self): return "OS(%s)" %self.name

class Windows(OS):
  name = "windows"; defaultTheme = "vista"
  def startFile(self, path:str): os.startfile(path)

class Linux(OS):
  name = "linux"; defaultTheme = "clam"
  def startFile(self, path:str): startSubProcess(("xdg-open", path))

class MacOS(OS):
  name = "darwin"; defaultTheme = "aqua"
  def startFile(self, path:str): startSubProcess(("open", path))

_systems = {"windows": Windows, "linux": Linux, "darwin": MacOS}

def detect(name:str=None) -> OS:
  '''the running OS, or the one [name]d like platform.system() does'''
  sysName = (name or platformName()).lower()
  ctor = _systems.get(sysName)
  if ctor == None: raise UnsupportedOSException(sysName)
  return ctor()
