'''
Binding of declared handlers to Tk: the three ways an intent like "click" or "change" becomes native wiring.
- command: the widget's [command] option, fired once per activation (button press, slider/scrollbar drag step)
- variable: a write trace on the wrapper's observable variable
- event: a raw Tk event sequence, e.g. "<Button-1>" or "<<Modified>>"
'''
import logging
from typing import Any, Callable, Iterable, Mapping, NamedTuple, Optional

from .errors import ConfigurationError

log = logging.getLogger(__name__)

class Event:
  '''what a handler callback receives: [data] is the native event, command args, or the new variable value'''
  def __init__(self, name:str, sender, data:Any=None, options:Optional[Mapping]=None):
    self.name,self.sender,self.data = name,sender,data
    self.options = options or {}
  def __repr__(self): return "Event(%s, %r, %r)" %(self.name, self.sender, self.data)

Guard = Callable[[Event], bool]
Action = Callable[[Event], Any]

class EventHandler(NamedTuple("EventHandler", [("name", str), ("callback", Callable[[Event], Optional[bool]]),
    ("options", Optional[Mapping]), ("pre", Optional[Guard]), ("post", Optional[Action])])):
  '''declared handler: [name] is click/change/select or a literal Tk event name. A callback returning False stops propagation'''
  def __new__(cls, name, callback, options=None, pre=None, post=None):
    return super().__new__(cls, name, callback, options, pre, post)

def _invoker(handler:EventHandler, item, pre:Iterable[Guard]=(), post:Iterable[Action]=()):
  guards = list(pre) + ([handler.pre] if handler.pre else [])
  actions = list(post) + ([handler.post] if handler.post else [])
  def invoke(data):
    ev = Event(handler.name, item, data, handler.options)
    if not all(guard(ev) for guard in guards): return None
    res = handler.callback(ev)
    for act in actions: act(ev)
    return res
  return invoke

def bindCommand(handler:EventHandler, item, pre=(), post=()):
  invoke = _invoker(handler, item, pre, post)
  log.debug("bind %s of %s as command", handler.name, item)
  item.addCommand(lambda *args: invoke(args))

def bindVariable(handler:EventHandler, item, pre=(), post=()):
  variable = getattr(item, "variable", None)
  if variable is None:
    raise ConfigurationError("%s has no variable to observe for %r" %(item.kind, handler.name), item.kind)
  invoke = _invoker(handler, item, pre, post)
  log.debug("bind %s of %s as variable trace", handler.name, item)
  variable.trace_add("write", lambda *_: invoke(item.value))

def bindEvent(handler:EventHandler, item, event_name:Optional[str]=None, pre=(), post=(), target=None):
  '''binds [event_name] (default handler.name) on [target] (default item.nativeHandle)'''
  invoke = _invoker(handler, item, pre, post)
  def onEvent(native_event):
    return "break" if invoke(native_event) is False else None
  name = event_name or handler.name
  log.debug("bind %s of %s as event %s", handler.name, item, name)
  (target if target is not None else item.nativeHandle).bind(name, onEvent, "+")
