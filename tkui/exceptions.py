'''Exceptions raised by tkui, all rooted at TclException'''

class TclException(Exception):
  '''registry or dispatch fault on the Python side of the binding'''

class TclInterpException(TclException):
  '''the interpreter rejected a script: bad syntax, unknown command, missing package'''
  def __init__(self, message:str, script:str=None):
    super().__init__(message)
    self.script = script
  def __str__(self):
    msg = super().__str__()
    return msg if self.script == None else "%s (while evaluating: %s)" %(msg, self.script)

class TkException(TclException):
  '''a Tk capability is missing or used the wrong way'''

class OptionNotFoundException(TkException):
  def __init__(self, name:str, owner:str=None):
    super().__init__("option %r not found" %name if owner == None else "option %r not found in %s" %(name, owner))
    self.name = name

class UnsupportedOSException(Exception):
  def __init__(self, name:str=""):
    super().__init__("unsupported operating system: %s" %(name or "unknown"))
    self.name = name
