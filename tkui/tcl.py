'''
Tcl interpreter handle and argument encoding.

Everything the binding does ends up as a script string evaluated by [Interp.eval],
so the quoting rules here decide whether a value reaches Tk as one word or many:
- a string that already starts with a quoting char (" ' { [) is passed as-is
- a string without whitespace is passed as-is
- anything else is brace-quoted, or double-quoted when braces can't carry it
'''
import logging
import os
import re
import sys
import tkinter
from tkinter import TclError

from .exceptions import TclException, TclInterpException, TkException

logger = logging.getLogger(__name__)

QUOTE_CHARS = ('"', "'", "{", "[")
_RE_SPACE = re.compile(r"\s")
_RE_DQ_SPECIAL = re.compile(r'([\\"\[\]$\{\}])')
_RE_LIST_SPECIAL = re.compile(r'[\s{}\[\]$"\\;]')

def _bracesBalanced(s:str) -> bool:
  depth = 0; escaped = False
  for ch in s:
    if escaped: escaped = False; continue
    if ch == "\\": escaped = True
    elif ch == "{": depth += 1
    elif ch == "}":
      depth -= 1
      if depth < 0: return False
  return depth == 0 and not escaped

def quoteString(s:str) -> str:
  '''encloses [s] in braces, or in double quotes with escapes when its braces are unbalanced'''
  if _bracesBalanced(s) and "\\\n" not in s: return "{%s}" %s
  return '"%s"' %_RE_DQ_SPECIAL.sub(r"\\\1", s)

def _plain(x) -> str:
  if isinstance(x, bool): return "1" if x else "0"
  if x == None: return ""
  return str(x)

def encloseArg(arg) -> str:
  '''encodes one argument of [TkApplication.tclEval]. Nested lists are NOT supported, use [strList] for those'''
  if isinstance(arg, str):
    if arg == "": return "{}"
    if arg[0] in QUOTE_CHARS: return arg
    return arg if _RE_SPACE.search(arg) == None else quoteString(arg)
  elif isinstance(arg, (list, tuple)):
    return "{%s}" %" ".join(_plain(it) for it in arg)
  elif arg == None: return "{}"
  return _plain(arg)

def listElement(x) -> str:
  s = _plain(x)
  if s == "": return "{}"
  return s if _RE_LIST_SPECIAL.search(s) == None else quoteString(s)

def strList(items) -> str:
  '''a Tcl list of [items] as a single word, each element quoted as needed'''
  return "{%s}" %" ".join(listElement(it) for it in items)


class Variable:
  '''a global Tcl variable, the value is a string for Tcl and typed by the reader'''
  def __init__(self, interp:"Interp", name:str):
    self.interp = interp
    self.name = name
    self._traces = []
  def __str__(self): return self.name
  def __repr__(self): return "Variable(%s)" %self.name

  def set(self, value):
    self.interp.setVar(self.name, _plain(value))
  def get(self): return self.interp.getVar(self.name)
  def asString(self) -> str: return str(self.get())
  def asInt(self) -> int: return self.interp.tkapp.getint(self.asString())
  def asFloat(self) -> float: return self.interp.tkapp.getdouble(self.asString())
  def asBool(self) -> bool: return bool(self.interp.tkapp.getboolean(self.asString()))

  def onChange(self, op):
    '''call op(value) after each write to this variable'''
    cmd = "PyTkui_Trace%d_%d" %(id(self), len(self._traces))
    self.interp.createCommand(cmd, lambda *args: op(self.asString()))
    self.interp.call("trace", "add", "variable", self.name, "write", cmd)
    self._traces.append(cmd)
    return cmd
  def unset(self):
    '''removes traces and the Tcl variable itself'''
    for cmd in self._traces:
      self.interp.call("trace", "remove", "variable", self.name, "write", cmd)
      self.interp.deleteCommand(cmd)
    self._traces.clear()
    self.interp.unsetVar(self.name)

class ArgvVariable(Variable):
  '''the interpreter's global argv list (argc follows it)'''
  def __init__(self, interp):
    super().__init__(interp, "argv")
  def append(self, *items):
    self.interp.call("lappend", self.name, *(_plain(it) for it in items))
    self.interp.setVar("argc", str(len(self.items())))
  def items(self): return self.interp.splitList(self.interp.call("set", self.name))


class Interp:
  '''a Tcl interpreter from tkinter.Tcl(), Tk is not loaded until [Tk.init]'''
  def __init__(self, argv=None):
    self.root = tkinter.Tcl()
    self.tkapp = self.root.tk
    self._result = ""
    self._initArgv = list(argv or ())
    self._isInit = False
    self._argv = ArgvVariable(self)

  def init(self):
    if self._isInit: return
    self.setVar("argv", "")
    self.setVar("argc", "0")
    self.setVar("tcl_interactive", "0")
    if self._initArgv: self._argv.append(*self._initArgv)
    self._isInit = True
  @property
  def isInit(self): return self._isInit

  def eval(self, script:str) -> str:
    logger.debug("eval: %s", script)
    try: self._result = self.tkapp.eval(script)
    except TclError as e: raise TclInterpException(str(e), script) from e
    return self._result
  def getStringResult(self) -> str: return self._result
  def call(self, *args):
    '''runs a command with native argument passing, no quoting involved'''
    try: return self.tkapp.call(*args)
    except TclError as e: raise TclInterpException(str(e), " ".join(str(it) for it in args)) from e

  def createCommand(self, name:str, op):
    self.tkapp.createcommand(name, op)
  def deleteCommand(self, name:str):
    try: self.tkapp.deletecommand(name)
    except TclError as e: raise TclInterpException(str(e), "rename %s {}" %name) from e

  def createVariable(self, name:str) -> Variable:
    if not self.hasVar(name): self.setVar(name, "")
    return Variable(self, name)
  def hasVar(self, name:str) -> bool:
    return bool(self.tkapp.getboolean(self.call("info", "exists", name)))
  def setVar(self, name, value):
    try: self.tkapp.globalsetvar(name, value)
    except TclError as e: raise TclInterpException(str(e), "set %s" %name) from e
  def getVar(self, name):
    try: return self.tkapp.globalgetvar(name)
    except TclError as e: raise TclInterpException(str(e), "set %s" %name) from e
  def unsetVar(self, name):
    try: self.tkapp.globalunsetvar(name)
    except TclError as e: raise TclInterpException(str(e), "unset %s" %name) from e
  def argv(self) -> ArgvVariable: return self._argv

  def splitList(self, value) -> tuple:
    if isinstance(value, tuple): return tuple(str(it) for it in value)
    try: return tuple(str(it) for it in self.tkapp.splitlist(value))
    except TclError as e: raise TclException("not a Tcl list: %r" %value) from e


class Tk:
  '''the Tk library inside an [Interp]'''
  def __init__(self, interp:Interp):
    self._interp = interp
    self._isLoaded = False
  def interp(self) -> Interp: return self._interp
  @property
  def isLoaded(self): return self._isLoaded
  @property
  def hasDisplay(self) -> bool:
    '''False on X11 systems without $DISPLAY, where [init] would fail'''
    if self._isLoaded or sys.platform in ("win32", "darwin"): return True
    return bool(os.environ.get("DISPLAY"))
  def init(self):
    if self._isLoaded: return
    try: self._interp.root.loadtk()
    except TclError as e: raise TkException("can't load Tk: %s" %e) from e
    self._isLoaded = True
  def mainLoop(self):
    if not self._isLoaded: raise TkException("Tk is not loaded, call init() first")
    self._interp.root.mainloop()
