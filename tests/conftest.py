'''fake native widgets standing in for tkinter, recording what the wrappers do to them'''
import pytest

from tkbuilder.registry import Registry, KindEntry, Factory, ITEM_CLASSES

class FakeEvent:
  def __init__(self, widget): self.widget = widget

class FakeWidget:
  OPTIONS = ()
  def __init__(self, master=None):
    self.master = master
    self.children = []
    self.options = {}
    self.calls = []
    self.bindings = {}
    self.gridInfo = None
    self.columnWeights = {}; self.rowWeights = {}
    if master is not None: master.children.append(self)
  def keys(self): return list(self.OPTIONS)
  def configure(self, **kwargs):
    self.options.update(kwargs)
    self.calls.append(("configure", kwargs))
  def cget(self, key): return self.options[key]
  def grid(self, **kwargs): self.gridInfo = kwargs
  def columnconfigure(self, index, weight): self.columnWeights[index] = weight
  def rowconfigure(self, index, weight): self.rowWeights[index] = weight
  def bind(self, sequence, op, add=None): self.bindings.setdefault(sequence, []).append(op)
  def fire(self, sequence, event=None): return [op(event) for op in list(self.bindings.get(sequence, []))]
  def configureCalls(self, key): return [kw for (name, kw) in self.calls if name == "configure" and key in kw]

class FakeScrollable(FakeWidget):
  def xview(self, *args): self.calls.append(("xview", args))
  def yview(self, *args): self.calls.append(("yview", args))

class FakeRoot(FakeWidget):
  OPTIONS = ("background", "menu")
  def __init__(self):
    super().__init__(None)
    self._title = "tk"
  def wm_title(self, title=None):
    if title is None: return self._title
    self._title = title

class FakeFrame(FakeWidget):
  OPTIONS = ("width", "height", "relief", "borderwidth", "padding", "style")
class FakeLabel(FakeWidget):
  OPTIONS = ("text", "anchor", "style")
class FakeButton(FakeWidget):
  OPTIONS = ("text", "command", "state")
class FakeEntry(FakeScrollable):
  OPTIONS = ("textvariable", "width", "state", "xscrollcommand")
class FakeScale(FakeWidget):
  OPTIONS = ("variable", "command", "from", "to", "orient", "length")
class FakeCanvas(FakeScrollable):
  OPTIONS = ("width", "height", "background", "xscrollcommand", "yscrollcommand", "scrollregion")
class FakeScrollbar(FakeWidget):
  OPTIONS = ("orient", "command")
  def set(self, *args): self.calls.append(("set", args))

class FakeText(FakeScrollable):
  OPTIONS = ("width", "height", "wrap", "padx", "pady", "xscrollcommand", "yscrollcommand")
  def __init__(self, master=None):
    super().__init__(master)
    self.text = ""
    self.modified = False
    self.sel = ()
  def _col(self, index): return len(self.text) if index.startswith("end") else int(index.split(".")[1])
  def get(self, index1, index2): return self.text[self._col(index1):self._col(index2)]
  def replace(self, index1, index2, chars):
    self.text = chars
    self._setModified(True)
  def insert(self, index, chars):
    self.text += chars
    self._setModified(True)
  def tag_ranges(self, tag): return self.sel if tag == "sel" else ()
  def tag_add(self, tag, index1, index2):
    if tag == "sel": self.sel = (index1, index2)
  def edit_modified(self, arg=None):
    if arg is None: return self.modified
    self._setModified(bool(arg))
  def _setModified(self, v):
    # Tk raises <<Modified>> whenever the flag flips
    if v != self.modified:
      self.modified = v
      self.fire("<<Modified>>", FakeEvent(self))

class FakeTree(FakeScrollable):
  OPTIONS = ("columns", "height", "selectmode", "show", "xscrollcommand", "yscrollcommand")
  def __init__(self, master=None):
    super().__init__(master)
    self.rows = []
    self._selection = []
    self._focus = ""
    self._tags = {}
    self.columnConf = {}; self.headings = {}
    self.tagBindings = {}
  def insert(self, parent, index, **kwargs):
    iid = "I%03d" %(len(self.rows) + 1)
    self.rows.append((parent, index, iid, kwargs))
    return iid
  def delete(self, *iids): self.rows = [r for r in self.rows if r[2] not in iids]
  def selection_add(self, iid): self._selection.append(iid)
  def selection(self): return tuple(self._selection)
  def focus(self): return self._focus
  def column(self, key, **kwargs): self.columnConf[key] = kwargs
  def heading(self, key, **kwargs): self.headings[key] = kwargs
  def item(self, iid, option=None, **kwargs):
    if option == "tags": return self._tags.get(iid, "")
    if "tags" in kwargs: self._tags[iid] = kwargs["tags"]
  def tag_bind(self, tag, sequence, op):
    # like Treeview.tag_bind, a new binding replaces the old one
    self.tagBindings[(tag, sequence)] = [op]
  def fireTag(self, tag, sequence, event=None): return [op(event) for op in self.tagBindings.get((tag, sequence), [])]

class FakeVariable:
  def __init__(self, master=None):
    self.master = master
    self._value = ""
    self.writes = 0
    self._traces = []
  def get(self): return self._value
  def set(self, value):
    self._value = str(value)
    self.writes += 1
    for op in list(self._traces): op("PY_VAR0", "", "write")
  def trace_add(self, mode, op): self._traces.append(op)

FAKE_CLASSES = {
  "root": FakeRoot,
  "frame": FakeFrame, "hframe": FakeFrame, "vframe": FakeFrame,
  "label": FakeLabel,
  "entry": FakeEntry,
  "button": FakeButton,
  "canvas": FakeCanvas,
  "text": FakeText,
  "scale": FakeScale,
  "group": FakeFrame,
  "tree": FakeTree,
  "hscrollbar": FakeScrollbar, "vscrollbar": FakeScrollbar
}

@pytest.fixture
def registry():
  return Registry({kind: KindEntry(FAKE_CLASSES.get(kind), cls) for (kind, cls) in ITEM_CLASSES.items()}, FakeVariable)

@pytest.fixture
def factory(registry): return Factory(registry)

@pytest.fixture
def root(factory): return factory.create(None, "root", {"title": "Test"})
