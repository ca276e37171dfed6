from typing import Any, Iterator, Mapping, Optional

from .exceptions import OptionNotFoundException

def tclOptionName(name:str) -> str:
  '''textVariable -> -textvariable'''
  return "-" + name.lower()

def kwargsNotNull(**kwargs):
  return {k: v for (k, v) in kwargs.items() if v != None}

class Options:
  '''
  A declared set of widget options. Only declared names may be set,
  None means "unset" and those are left out of Tcl commands.
  '''
  def __init__(self, declared:Optional[Mapping[str, Any]]=None, owner:str=None):
    self._values = dict(declared or {})
    self.owner = owner

  def __getitem__(self, name):
    try: return self._values[name]
    except KeyError: raise OptionNotFoundException(name, self.owner) from None
  def __setitem__(self, name, value):
    if name not in self._values: raise OptionNotFoundException(name, self.owner)
    self._values[name] = value
  def __contains__(self, name): return name in self._values
  def __iter__(self) -> Iterator[str]: return iter(self._values)
  def __len__(self): return len(self._values)
  def __eq__(self, other): return isinstance(other, Options) and self._values == other._values
  def __repr__(self): return "Options(%s)" %", ".join("%s=%r" %kv for kv in self.items())

  def get(self, name, default=None): return self._values.get(name, default)
  def items(self):
    '''the options which are set'''
    return [(k, v) for (k, v) in self._values.items() if v != None]
  def names(self): return list(self._values)

  def update(self, values:Mapping[str, Any]) -> "Options":
    for (name, v) in values.items(): self[name] = v
    return self
  def asStringArray(self, encode=str) -> list:
    '''[-name, value, ...] for set options, values converted by [encode]'''
    args = []
    for (name, v) in self.items():
      args.append(tclOptionName(name)); args.append(encode(v))
    return args
