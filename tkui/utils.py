import logging
import traceback

logger = logging.getLogger(__name__)

class EventCallback:
  '''
  Hooks of one application event such as app.onQuit, run in the order they were added.
  A failing hook is logged with the place it was added from and the rest still run;
  a hook may call [stopChain] to skip the ones after it.
  '''
  class CallbackBreak(Exception): pass

  def __init__(self, name:str="event"):
    self.name = name
    self._hooks = [] # (op, args, "file:line" of the bind site)
  def __repr__(self): return "EventCallback(%s, %d hooks)" %(self.name, len(self._hooks))
  def __len__(self): return len(self._hooks)
  def __contains__(self, op): return any(hook[0] == op for hook in self._hooks)

  @staticmethod
  def stopChain(): raise EventCallback.CallbackBreak()

  @staticmethod
  def _bindSite() -> str:
    frames = [it for it in traceback.extract_stack() if it.filename != __file__]
    return "%s:%d" %(frames[-1].filename, frames[-1].lineno) if frames else "?"
  def bind(self, op, args=()):
    '''adds op(*args, *eventArgs)'''
    self._hooks.append((op, tuple(args), self._bindSite()))
    return self
  def __iadd__(self, op): return self.bind(op)

  def remove(self, op):
    '''removes the first hook of [op], whatever its args'''
    for (i, hook) in enumerate(self._hooks):
      if hook[0] == op:
        del self._hooks[i]
        return
    raise ValueError("not bound to %s: %r" %(self.name, op))

  def run(self, *eventArgs) -> bool:
    '''False when a hook asked to [stopChain]'''
    for (op, args, site) in list(self._hooks):
      try: op(*args, *eventArgs)
      except EventCallback.CallbackBreak: return False
      except Exception: logger.exception("%s hook %r failed, bound at %s", self.name, op, site)
    return True
