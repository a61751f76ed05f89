from argparse import ArgumentParser
import logging
import os

from tkbuilder import Factory, Registry, EventHandler, WeightMap, Backend

app = ArgumentParser(prog="tkbuilder-example", description="browse a directory with tkbuilder widgets")
app.add_argument("dir", nargs="?", default=".", help="directory to list")
app.add_argument("-tk", action="store_true", default=False, help="use plain tk instead of ttk")
app.add_argument("-v", action="store_true", default=False, help="log widget construction")

def main(args):
  if args.v: logging.basicConfig(level=logging.DEBUG)
  if args.tk: Backend.Tk.use()
  factory = Factory(Registry.default())
  z = factory.create
  root = z(None, "root", {"title": "Files"}, {"weights": WeightMap({0: 1}, {0: 1})})
  status = z(root, "entry", {"value": os.path.abspath(args.dir)}, {"row": 1, "column": 0, "sticky": "we"})
  def onSelect(ev):
    tree = ev.sender.nativeHandle
    status.updateValue(" ".join(tree.item(iid, "text") for iid in tree.selection()))
  tree = z(root, "tree", {"scrollers": "both", "columnDefs": [{"key": "#0", "headingText": "Name", "width": 240},
      {"key": "size", "headingText": "Size", "anchor": "e"}]},
    {"row": 0, "column": 0, "sticky": "nwes"}, [EventHandler("select", onSelect)])
  for (i, name) in enumerate(sorted(os.listdir(args.dir))):
    size = os.path.getsize(os.path.join(args.dir, name))
    z(tree, "treeNode", {"text": name, "values": (size,), "selected": i == 0})
  root.nativeHandle.mainloop()

if __name__ == "__main__": main(app.parse_args())
