import pytest

from tkbuilder.events import EventHandler
from tkbuilder.items import TkScale, TkText

def test_update_value_skips_same_string(factory, root):
  entry = factory.create(root, "entry", {"value": 5})
  writes = entry.variable.writes
  entry.updateValue(5)
  entry.updateValue("5")
  assert entry.variable.writes == writes
  entry.updateValue(6)
  assert entry.variable.writes == writes + 1
  assert entry.value == "6"

def test_typed_views(factory, root):
  scale = factory.create(root, "scale", {"value": "2.5", "from": 0, "to": 10})
  assert isinstance(scale, TkScale)
  assert scale.iValue == 2 and scale.fValue == 2.5 and scale.sValue == "2.5"
  assert (scale.from_, scale.to) == (0, 10)
  assert scale.nativeHandle.options["variable"] is scale.variable

def test_variable_master_is_parent(factory, root):
  entry = factory.create(root, "entry")
  assert entry.variable.master is root.nativeHandle

def test_scale_change_is_continuous(factory, root):
  seen = []
  scale = factory.create(root, "scale", {}, {}, [EventHandler("change", lambda ev: seen.append(ev.data))])
  scale.nativeHandle.options["command"]("0.3")
  scale.nativeHandle.options["command"]("0.4")
  assert seen == [("0.3",), ("0.4",)]

def test_text_value(factory, root):
  text = factory.create(root, "text", {"value": "hello", "wrap": "word"})
  assert isinstance(text, TkText)
  assert text.value == "hello"
  text.appendText(" world")
  assert text.value == "hello world"
  assert text.selectedText() is None
  text.selectRange("1.0", "1.5")
  assert text.selectedText() == "hello"

def test_text_change_fires_once(factory, root):
  seen = []
  text = factory.create(root, "text", {"value": "a"}, {}, [EventHandler("change", seen.append)])
  native = text.nativeHandle
  assert native.modified is False
  text.value = "b"
  assert len(seen) == 1
  assert native.modified is False
  text.updateValue("b")
  assert len(seen) == 1

def test_text_change_ignores_other_widgets(factory, root):
  seen = []
  text = factory.create(root, "text", {}, {}, [EventHandler("change", seen.append)])
  text.nativeHandle.modified = True
  text.nativeHandle.fire("<<Modified>>", type("E", (), {"widget": object()})())
  assert seen == []

def test_text_change_reaches_every_handler(factory, root):
  first, second = [], []
  text = factory.create(root, "text", {}, {}, [EventHandler("change", first.append), EventHandler("change", second.append)])
  assert len(text.nativeHandle.bindings["<<Modified>>"]) == 1
  text.value = "edited"
  assert (len(first), len(second)) == (1, 1)
  assert text.nativeHandle.modified is False
  text.appendText("!")
  assert (len(first), len(second)) == (2, 2)

def test_text_change_break_stops_later_handlers(factory, root):
  seen = []
  text = factory.create(root, "text", {}, {}, [
    EventHandler("change", lambda ev: seen.append(1) or False),
    EventHandler("change", lambda ev: seen.append(2))])
  text.value = "x"
  assert seen == [1]
  assert text.nativeHandle.modified is False

def test_trailing_underscore_option(factory, root):
  scale = factory.create(root, "scale", {"from_": 1, "to": 9})
  assert scale.nativeHandle.options["from_"] == 1
