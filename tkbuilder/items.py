'''
Widget wrappers: each one owns a native Tk handle (nativeHandle) and applies options, grid placement and handlers to it.

Per-kind behavior is an override chain over TkItem:
- applyOption(name, value, target) consumes the options a kind knows, the rest goes to super()
- setEventHandler(handler) picks the binding way (command / variable / event), the rest goes to super()
Mixins (ValueTyping, Scrollable) are listed before TkItem in the bases so they see options first.
'''
import logging
from enum import Enum
from typing import Any, List, Mapping, NamedTuple, Optional, Sequence, Union

from .errors import ConfigurationError, MSG_UNKNOWN_OPTION, MSG_ABSTRACT
from .events import EventHandler, bindCommand, bindVariable, bindEvent
from .utils import EventCallback, WeightMap, kwargsNotNull

log = logging.getLogger(__name__)

def asHandler(h) -> EventHandler:
  '''accepts an EventHandler or a mapping like {"name": "click", "callback": op}'''
  return h if isinstance(h, EventHandler) else EventHandler(**h)

class TkItem:
  def __init__(self, registry, parent:"Optional[TkItem]", kind:str, options=None, layout=None, event_handlers=()):
    self._initState(registry, parent, kind)
    native_class = registry.nativeClass(kind)
    self.nativeHandle = native_class(self._parentHandle())
    log.debug("created %s as %s", kind, native_class.__name__)
    self.applyOptions(dict(options or {}))
    self.setLayout(dict(layout or {}))
    self.setEventHandlers(event_handlers)

  def _initState(self, registry, parent, kind):
    self.registry,self.parent,self.kind = registry,parent,kind
    self.nativeHandle:Any = None
    self._command:Optional[EventCallback] = None

  def _parentHandle(self):
    if self.parent is None: raise ConfigurationError("%s needs a parent item" %self.kind, self.kind)
    return self.parent.nativeHandle

  def __repr__(self): return "%s(%s)" %(type(self).__name__, self.kind)

  def applyOptions(self, options:Mapping[str, Any], target=None):
    for (name, value) in list(options.items()):
      self.applyOption(name, value, target)

  def applyOption(self, name:str, value, target=None):
    '''forwards to the native option of the same name, which must be one the widget declares'''
    native = target if target is not None else self.nativeHandle
    # tkinter spells some options with a trailing _, like from_
    if (name[:-1] if name.endswith("_") else name) not in native.keys():
      raise ConfigurationError(MSG_UNKNOWN_OPTION %(self.kind, name), self.kind)
    native.configure(**{name: value})

  def setLayout(self, layout:Mapping[str, Any], target=None):
    '''grid placement of [target], a "weights" entry (WeightMap) configures the stretch of our own rows/columns'''
    layout = dict(layout)
    weights = layout.pop("weights", None)
    (target if target is not None else self.nativeHandle).grid(**layout)
    if weights is not None: self.applyWeightMap(weights)

  def applyWeightMap(self, weights:WeightMap):
    for c in weights.columnIndexes: self.nativeHandle.columnconfigure(c, weight=weights.columnWeight(c))
    for r in weights.rowIndexes: self.nativeHandle.rowconfigure(r, weight=weights.rowWeight(r))

  def setEventHandlers(self, event_handlers:Sequence):
    for h in event_handlers: self.setEventHandler(asHandler(h))

  def setEventHandler(self, handler:EventHandler):
    if handler.name == "click": bindCommand(handler, self)
    elif handler.name == "change": bindVariable(handler, self)
    else: bindEvent(handler, self)

  def addCommand(self, op):
    '''adds [op] to the listeners of the native "command", ops run in order'''
    if self._command is None:
      self._command = EventCallback()
      self.nativeHandle.configure(command=self._command.run)
    self._command.bind(op)


class ValueTyping:
  '''a "value" option and typed views of it, for classes that define the [value] property'''
  def applyOption(self, name, value, target=None):
    if name == "value": self.value = value
    else: super().applyOption(name, value, target)

  def updateValue(self, v):
    '''writes [v] only if it reads different, so that traces don't fire for nothing'''
    if str(self.value) != str(v): self.value = v

  @property
  def iValue(self) -> int: return int(float(self.value))
  @property
  def fValue(self) -> float: return float(self.value)
  @property
  def sValue(self) -> str: return str(self.value)


class TkItemWithVariable(ValueTyping, TkItem):
  '''displayed value mirrored by an observable variable, set on the native option [variableName]'''
  variableName = "variable"

  def __init__(self, registry, parent, kind, options=None, layout=None, event_handlers=()):
    self.variable = registry.newVariable(parent.nativeHandle if parent is not None else None)
    super().__init__(registry, parent, kind, options, layout, event_handlers)
    self.nativeHandle.configure(**{self.variableName: self.variable})

  @property
  def value(self): return self.variable.get()
  @value.setter
  def value(self, v): self.variable.set(v)

class TkEntry(TkItemWithVariable):
  variableName = "textvariable"

class TkScale(TkItemWithVariable):
  variableName = "variable"

  @property
  def from_(self): return self.nativeHandle.cget("from")
  @property
  def to(self): return self.nativeHandle.cget("to")

  def setEventHandler(self, handler):
    # every drag step is reported, not only the settled value
    if handler.name == "change": bindCommand(handler, self)
    else: super().setEventHandler(handler)


FRAME_OPTIONS = ("width", "height", "relief", "borderwidth", "padx", "pady", "padding")

class Scrollable:
  '''
  with option scrollers=x/y/both, the item is built as frame(widget, xbar?, ybar?), sharing one grid cell:
    widget(0,0) ybar(1,0)
    xbar(0,1)
  nativeHandle is the inner widget, the frame only receives the layout and FRAME_OPTIONS.
  '''
  def __init__(self, registry, parent, kind, options=None, layout=None, event_handlers=()):
    options = dict(options or {})
    scrollers = options.pop("scrollers", None)
    if not scrollers or scrollers == "none":
      super().__init__(registry, parent, kind, options, layout, event_handlers)
      return
    self._initState(registry, parent, kind)
    native_class = registry.nativeClass(kind)
    frame = registry.nativeClass("frame")(self._parentHandle())
    real = native_class(frame)
    log.debug("created scrollable %s (%s) as %s", kind, scrollers, native_class.__name__)

    frame_keys = frame.keys()
    f_options = {k: v for (k, v) in options.items() if k in FRAME_OPTIONS and k in frame_keys}
    for (k, v) in f_options.items(): TkItem.applyOption(self, k, v, frame)
    self.nativeHandle = real
    real_keys = real.keys()
    self.applyOptions({k: v for (k, v) in options.items() if k not in f_options or k in real_keys})
    self.setLayout(dict(layout or {}), frame)
    real.grid(column=0, row=0, sticky="nwes")

    h_bar = v_bar = None
    if scrollers == "both" or "x" in scrollers:
      h_bar = registry.nativeClass("hscrollbar")(frame)
      h_bar.configure(orient="horizontal", command=lambda *args: real.xview(*args))
      real.configure(xscrollcommand=lambda *args: h_bar.set(*args))
      h_bar.grid(column=0, row=1, sticky="wes")
    if scrollers == "both" or "y" in scrollers:
      v_bar = registry.nativeClass("vscrollbar")(frame)
      v_bar.configure(orient="vertical", command=lambda *args: real.yview(*args))
      real.configure(yscrollcommand=lambda *args: v_bar.set(*args))
      v_bar.grid(column=1, row=0, sticky="nse")
    frame.columnconfigure(0, weight=1)
    if v_bar is not None: frame.columnconfigure(1, weight=0)
    frame.rowconfigure(0, weight=1)
    if h_bar is not None: frame.rowconfigure(1, weight=0)
    self.setEventHandlers(event_handlers)


class _SequenceChains:
  '''
  bind() target keeping one EventCallback per sequence, bound natively once with [bind_native](sequence, dispatch).
  [pre] (native event -> bool) gates the whole chain, [post] runs after it. An op returning "break" ends the chain.
  '''
  def __init__(self, bind_native, pre=None, post=None):
    self._bindNative = bind_native
    self._pre,self._post = pre,post
    self._chains = {}
  def bind(self, sequence, op, add=None):
    chain = self._chains.get(sequence)
    if chain is None:
      chain = self._chains[sequence] = EventCallback()
      self._bindNative(sequence, self._dispatcher(chain))
    chain.bind(lambda native_event: op(native_event) != "break")
  def _dispatcher(self, chain):
    def dispatch(native_event):
      if self._pre is not None and not self._pre(native_event): return None
      completed = chain.run(native_event)
      if self._post is not None: self._post(native_event)
      return None if completed else "break"
    return dispatch

class TkText(ValueTyping, Scrollable, TkItem):
  START, END = "1.0", "end"
  _modified:Optional[_SequenceChains] = None

  @property
  def value(self) -> str: return self.nativeHandle.get(TkText.START, "end - 1 char")
  @value.setter
  def value(self, text): self.nativeHandle.replace(TkText.START, TkText.END, text)

  def selectedText(self) -> Optional[str]:
    ranges = self.nativeHandle.tag_ranges("sel")
    if not ranges: return None
    return self.nativeHandle.get(ranges[0], ranges[1])
  def appendText(self, text:str): self.nativeHandle.insert(TkText.END, text)
  def selectRange(self, from_, to): self.nativeHandle.tag_add("sel", from_, to)

  def _isModified(self, native_event) -> bool:
    sender = getattr(native_event, "widget", self.nativeHandle)
    return sender is self.nativeHandle and bool(self.nativeHandle.edit_modified())
  def _clearModified(self, native_event):
    self.nativeHandle.edit_modified(False)

  def _modifiedChains(self) -> _SequenceChains:
    # clearing the flag raises <<Modified>> again, _isModified drops that one
    if self._modified is None:
      self.nativeHandle.edit_modified(False)
      self._modified = _SequenceChains(lambda seq, op: self.nativeHandle.bind(seq, op, "+"),
        pre=self._isModified, post=self._clearModified)
    return self._modified

  def setEventHandler(self, handler):
    if handler.name == "change": bindEvent(handler, self, "<<Modified>>", target=self._modifiedChains())
    else: super().setEventHandler(handler)


PRIMARY_COLUMN = "#0"

class ColumnDef(NamedTuple("ColumnDef", [("key", str), ("width", Optional[int]), ("anchor", Optional[str]), ("headingText", Optional[str])])):
  def __new__(cls, key, width=None, anchor=None, headingText=None):
    return super().__new__(cls, key, width, anchor, headingText)
  @staticmethod
  def of(cd:"Union[ColumnDef, Mapping]") -> "ColumnDef":
    return cd if isinstance(cd, ColumnDef) else ColumnDef(**cd)

class TkTree(Scrollable, TkItem):
  def __init__(self, registry, parent, kind, options=None, layout=None, event_handlers=()):
    self.columnDefs:List[ColumnDef] = []
    super().__init__(registry, parent, kind, options, layout, event_handlers)

  def applyOptions(self, options, target=None):
    super().applyOptions(options, target)
    if not self.columnDefs: return
    native = target if target is not None else self.nativeHandle
    keys = [cd.key for cd in self.columnDefs]
    if keys != [PRIMARY_COLUMN]: native.configure(columns=[k for k in keys if k != PRIMARY_COLUMN])
    for cd in self.columnDefs:
      column_conf = kwargsNotNull(width=cd.width, anchor=cd.anchor)
      if column_conf: native.column(cd.key, **column_conf)
      if cd.headingText: native.heading(cd.key, text=cd.headingText)

  def applyOption(self, name, value, target=None):
    if name == "columnDefs": self.columnDefs = [ColumnDef.of(cd) for cd in value]
    elif name == "heading": self.columnDefs = [ColumnDef(PRIMARY_COLUMN, headingText=value)]
    else: super().applyOption(name, value, target)

  def setEventHandler(self, handler):
    if handler.name == "select": bindEvent(handler, self, "<<TreeviewSelect>>")
    else: super().setEventHandler(handler)


class TkTreeNode(TkItem):
  '''a row inserted in [parent] (a tree item). nativeHandle is the row id'''
  def __init__(self, registry, parent, kind, options=None, layout=None, event_handlers=()):
    self._initState(registry, parent, kind)
    if not isinstance(parent, TkTree):
      raise ConfigurationError("%s must be created inside a tree, not %r" %(kind, parent), kind)
    options = dict(options or {})
    parent_node = options.pop("parent", None) or ""
    at = options.pop("at", None)
    selected = options.pop("selected", False)
    self.tree = parent
    parent_id = parent_node if isinstance(parent_node, str) else parent_node.nativeHandle
    self.nativeHandle = self.tree.nativeHandle.insert(parent_id, "end" if at is None else at, **options)
    log.debug("inserted %s %s under %r", kind, self.nativeHandle, parent_id)
    if selected: self.tree.nativeHandle.selection_add(self.nativeHandle)
    self.setEventHandlers(event_handlers)

  @property
  def isSelected(self) -> bool: return self.nativeHandle in self.tree.nativeHandle.selection()
  def remove(self): self.tree.nativeHandle.delete(self.nativeHandle)

  _tagChains:Optional[_SequenceChains] = None

  def _tagged(self) -> _SequenceChains:
    '''bind() target through a tag only this node carries, tag_bind replaces so it is called once per sequence'''
    if self._tagChains is None:
      native, tag = self.tree.nativeHandle, self.nativeHandle
      tags = native.item(tag, "tags") or ()
      if tag not in tags: native.item(tag, tags=tuple(tags) + (tag,))
      self._tagChains = _SequenceChains(lambda seq, op: native.tag_bind(tag, seq, op))
    return self._tagChains

  def setEventHandler(self, handler):
    tree = self.tree.nativeHandle
    focused = lambda ev: tree.focus() == self.nativeHandle
    if handler.name == "select":
      bindEvent(handler, self, "<<TreeviewSelect>>", pre=[lambda ev: self.isSelected], target=tree)
    elif handler.name == "open": bindEvent(handler, self, "<<TreeviewOpen>>", pre=[focused], target=tree)
    elif handler.name == "close": bindEvent(handler, self, "<<TreeviewClose>>", pre=[focused], target=tree)
    elif handler.name == "click": bindEvent(handler, self, "<Button-1>", target=self._tagged())
    elif handler.name == "change":
      raise ConfigurationError("%s has no value to observe for %r" %(self.kind, handler.name), self.kind)
    else: bindEvent(handler, self, target=self._tagged())


class Orient(Enum):
  '''(orient, view method, linked widget's scroll option, scrollbar method it calls)'''
  HORIZONTAL = ("horizontal", "xview", "xscrollcommand", "set")
  VERTICAL = ("vertical", "yview", "yscrollcommand", "set")
  def __init__(self, orient, scroll_command, linked_scroll_command, linked_scroll_event):
    self.orient,self.scrollCommand = orient,scroll_command
    self.linkedScrollCommand,self.linkedScrollEvent = linked_scroll_command,linked_scroll_event

class ScrollBar(TkItem):
  '''scrollbar driving the view of the items in option "linkedTo", use HScrollBar / VScrollBar'''
  orientation:Optional[Orient] = None

  def __init__(self, registry, parent, kind, options=None, layout=None, event_handlers=()):
    self.linkedTo:list = []
    super().__init__(registry, parent, kind, options, layout, event_handlers)

  def _orientation(self) -> Orient:
    if self.orientation is None: raise ConfigurationError(MSG_ABSTRACT %type(self).__name__, self.kind)
    return self.orientation
  @property
  def orient(self) -> str: return self._orientation().orient
  @property
  def scrollCommand(self) -> str: return self._orientation().scrollCommand
  @property
  def linkedScrollCommand(self) -> str: return self._orientation().linkedScrollCommand
  @property
  def linkedScrollEvent(self) -> str: return self._orientation().linkedScrollEvent

  def applyOptions(self, options, target=None):
    super().applyOptions({**options, "orient": self.orient}, target)

  def applyOption(self, name, value, target=None):
    if name == "linkedTo": self.linkedTo = list(value) if isinstance(value, (list, tuple)) else [value]
    else: super().applyOption(name, value, target)

  def setEventHandlers(self, event_handlers):
    self.bindLinkedTo()
    super().setEventHandlers(event_handlers)

  def bindLinkedTo(self):
    if not self.linkedTo: return
    natives = [it.nativeHandle for it in self.linkedTo]
    view, scroll_option, on_scroll = self.scrollCommand, self.linkedScrollCommand, self.linkedScrollEvent
    def scrollLinked(*args):
      for e in natives: getattr(e, view)(*args)
    self.addCommand(scrollLinked)
    for e in natives: e.configure(**{scroll_option: lambda *args: getattr(self.nativeHandle, on_scroll)(*args)})
    log.debug("%r linked to %r", self, self.linkedTo)

  def setEventHandler(self, handler):
    if handler.name == "change": bindCommand(handler, self)
    else: super().setEventHandler(handler)

class HScrollBar(ScrollBar):
  orientation = Orient.HORIZONTAL
class VScrollBar(ScrollBar):
  orientation = Orient.VERTICAL


class TkWindow(TkItem):
  '''the top-level window, "title" is set on creation and layout only carries "weights"'''
  def __init__(self, registry, parent, kind, options=None, layout=None, event_handlers=()):
    self._initState(registry, None, kind)
    options = dict(options or {})
    title = options.pop("title", None)
    self.nativeHandle = registry.nativeClass(kind)()
    if title is not None: self.nativeHandle.wm_title(title)
    self.applyOptions(options)
    weights = (layout or {}).get("weights")
    if weights is not None: self.applyWeightMap(weights)
    self.setEventHandlers(event_handlers)

  @property
  def title(self) -> str: return self.nativeHandle.wm_title()
  @title.setter
  def title(self, v): self.nativeHandle.wm_title(v)
