'''
Kinds table and factory: Factory(registry).create(parent, kind, options, layout, event_handlers).
Registry is immutable, build the default one or pass explicit KindEntry-s (e.g. fake native classes)
'''
import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping, NamedTuple, Optional, Sequence

from .errors import ConfigurationError, unknownKind
from .items import TkItem, TkWindow, TkEntry, TkScale, TkText, TkTree, TkTreeNode, HScrollBar, VScrollBar
from .utils import BackendEnum, Backend, usedBackend

log = logging.getLogger(__name__)

class KindEntry(NamedTuple("KindEntry", [("nativeClass", Optional[Callable]), ("itemClass", type)])): pass

ITEM_CLASSES = {
  "root": TkWindow,
  "frame": TkItem, "hframe": TkItem, "vframe": TkItem,
  "label": TkItem,
  "entry": TkEntry,
  "button": TkItem,
  "canvas": TkItem,
  "text": TkText,
  "scale": TkScale,
  "group": TkItem,
  "tree": TkTree,
  "treeNode": TkTreeNode,
  "hscrollbar": HScrollBar, "vscrollbar": VScrollBar
}

def _nativeClasses(backend:BackendEnum):
  import tkinter as tk
  import tkinter.ttk as ttk
  lib = ttk if backend == Backend.TTk else tk
  return {
    "root": tk.Tk,
    "frame": lib.Frame, "hframe": lib.Frame, "vframe": lib.Frame,
    "label": lib.Label,
    "entry": lib.Entry,
    "button": lib.Button,
    "canvas": tk.Canvas,
    "text": tk.Text,
    "scale": lib.Scale,
    "group": lib.LabelFrame,
    "tree": ttk.Treeview,
    "hscrollbar": lib.Scrollbar, "vscrollbar": lib.Scrollbar
  }

class Registry:
  def __init__(self, entries:Mapping[str, KindEntry], variable_class:Optional[Callable]=None):
    self._entries = MappingProxyType(dict(entries))
    self._variableClass = variable_class

  @staticmethod
  def default(backend:Optional[BackendEnum]=None) -> "Registry":
    '''tkinter classes of [backend] (default: the used one, see Backend.use)'''
    natives = _nativeClasses(backend or usedBackend())
    return Registry({kind: KindEntry(natives.get(kind), cls) for (kind, cls) in ITEM_CLASSES.items()})

  def replace(self, **entries:KindEntry) -> "Registry":
    return Registry({**self._entries, **entries}, self._variableClass)

  @property
  def kinds(self) -> Sequence[str]: return list(self._entries)
  def __contains__(self, kind): return kind in self._entries

  def _entry(self, kind) -> KindEntry:
    entry = self._entries.get(kind)
    if entry is None: raise unknownKind(kind)
    return entry
  def itemClass(self, kind:str) -> type: return self._entry(kind).itemClass
  def nativeClass(self, kind:str) -> Callable:
    native_class = self._entry(kind).nativeClass
    if native_class is None: raise unknownKind(kind)
    return native_class

  def newVariable(self, master=None):
    if self._variableClass is None:
      from tkinter import StringVar
      return StringVar(master=master)
    return self._variableClass(master=master)


class WidgetSpec(NamedTuple("WidgetSpec", [("kind", str), ("options", Optional[Mapping[str, Any]]),
    ("layout", Optional[Mapping[str, Any]]), ("eventHandlers", Sequence)])):
  def __new__(cls, kind, options=None, layout=None, eventHandlers=()):
    return super().__new__(cls, kind, options, layout, eventHandlers)

class Factory:
  def __init__(self, registry:Optional[Registry]=None):
    self.registry = registry if registry is not None else Registry.default()

  def create(self, parent:Optional[TkItem], kind:str, options=None, layout=None, event_handlers=()) -> TkItem:
    if kind not in self.registry: raise unknownKind(kind)
    log.debug("create %s in %r", kind, parent)
    return self.registry.itemClass(kind)(self.registry, parent, kind, options, layout, event_handlers)

  def build(self, parent:Optional[TkItem], spec:WidgetSpec) -> TkItem:
    return self.create(parent, spec.kind, spec.options, spec.layout, spec.eventHandlers)

__all__ = ["ConfigurationError", "KindEntry", "Registry", "WidgetSpec", "Factory", "ITEM_CLASSES"]
