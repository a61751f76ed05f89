'''
Declarative widget construction for tkinter: give a kind, options, grid placement and handlers, get a wrapper.

  factory = Factory()  # Registry.default(): ttk classes, or Backend.Tk.use() before for plain tk
  root = factory.create(None, "root", {"title": "Files"}, {"weights": WeightMap({0: 1}, {0: 1})})
  tree = factory.create(root, "tree", {"heading": "Name", "scrollers": "both"}, {"row": 0, "column": 0, "sticky": "nwes"},
    [EventHandler("select", onSelect)])
  factory.create(tree, "treeNode", {"text": "README", "selected": True})

Options known here: value, scrollers (none/x/y/both), columnDefs, heading, linkedTo, and parent/at/selected for tree nodes.
Anything else must be an option the native widget declares (widget.keys()), else ConfigurationError.
Handler names: click (command), change (variable, or command for scale/scrollbar, <<Modified>> for text),
select (trees), or a literal Tk event like "<Double-1>".
'''

__all__ = ["errors", "events", "items", "registry", "utils",
  "ConfigurationError", "EventHandler", "Event", "Factory", "Registry", "KindEntry", "WidgetSpec", "WeightMap", "Backend"]
from .errors import ConfigurationError
from .events import EventHandler, Event
from .registry import Factory, Registry, KindEntry, WidgetSpec
from .utils import WeightMap, Backend
