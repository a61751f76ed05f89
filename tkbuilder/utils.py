import logging
from typing import Dict, Iterable, Mapping, Optional

log = logging.getLogger(__name__)

def kwargsNotNull(**kwargs):
  return {k: v for (k, v) in kwargs.items() if v != None}

class BackendEnum():
  def __init__(self, name:str, module_name:str):
    self.name=name;self.module_name=module_name
  def __eq__(self, other): return isinstance(other, BackendEnum) and other.name == self.name
  def __hash__(self): return self.name.__hash__()
  def __repr__(self): return "Backend(%s)" %self.name
  def isAvaliable(self):
    try: __import__(self.module_name); return True
    except ImportError: return False
  def use(self):
    global guiBackend
    if self.isAvaliable(): guiBackend = self
    else: next(filter(BackendEnum.isAvaliable, Backend.fallbackOrder)).use()
    log.debug("using backend %s", guiBackend.name)
  def isUsed(self):
    return guiBackend == self

class Backend:
  '''which native classes the default registry builds: themed ttk (default) or plain tk'''
  Tk = BackendEnum("tk", "tkinter")
  TTk = BackendEnum("ttk", "tkinter.ttk")
  fallbackOrder = [TTk, Tk]
guiBackend = Backend.TTk

def usedBackend() -> BackendEnum: return guiBackend

class EventCallback:
  """An object that calls functions in bind order. Use [bind] / [__add__] or [run]"""
  def __init__(self):
    self._callbacks = []

  class CallbackBreak(Exception): pass
  @staticmethod
  def stopChain(): raise EventCallback.CallbackBreak()

  def bind(self, op):
    self._callbacks.append(op)
  def __add__(self, op):
    self.bind(op); return self
  def __len__(self): return len(self._callbacks)

  def remove(self, op):
    """Undo a [bind] call"""
    try: self._callbacks.remove(op)
    except ValueError: raise ValueError("not bound: %r" %op)

  def run(self, *args) -> bool:
    """Run the connected callbacks with [args]. If one requested [stopChain] or returned False, return False"""
    for op in list(self._callbacks):
      try: res = op(*args)
      except EventCallback.CallbackBreak: return False
      if res is False: return False
    return True
  __call__ = run

class WeightMap:
  '''column/row stretch weights of a grid container, given as {index: weight}'''
  def __init__(self, columns:Optional[Mapping[int, int]]=None, rows:Optional[Mapping[int, int]]=None):
    self._columns:Dict[int, int] = dict(columns or {})
    self._rows:Dict[int, int] = dict(rows or {})
  @property
  def columnIndexes(self) -> Iterable[int]: return list(self._columns)
  @property
  def rowIndexes(self) -> Iterable[int]: return list(self._rows)
  def columnWeight(self, i:int) -> int: return self._columns.get(i, 0)
  def rowWeight(self, i:int) -> int: return self._rows.get(i, 0)
  def setColumn(self, i, weight): self._columns[i] = weight; return self
  def setRow(self, i, weight): self._rows[i] = weight; return self
  def __repr__(self): return "WeightMap(%r, %r)" %(self._columns, self._rows)
