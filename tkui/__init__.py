'''
This is an object-oriented binding for the Tcl/Tk widget set.
use AppFactory().create() for a TkApplication, MainWindow(app, title) for the root window, and widgets from tkui.widgets

Common knowledges on Tk:
- every widget is a path in the interpreter: ".", ".f1", ".f1.b2", destroying a path destroys its children
- all calls are text commands evaluated by one Tcl interpreter, see tkui.tcl for the quoting rules
- three layout managers: pack(box-layout), grid, place(absolute), widgets are invisible until managed
- Tk should be singleton, use Window(app) for a new toplevel
- Parallelism: Tk is single threaded, use app.after(ms, op) instead of calling from other threads
Notice:
- callbacks get the widget as first argument: button.onClick(lambda btn: ...)
- one command callback per widget path, registering again replaces it
- a widget's text variable is named after its path and released by destroy()
- ttk is required by most widgets; when it can't be loaded app.hasTtk() is False and the reason is logged
'''

__all__ = ["app", "bindings", "config", "exceptions", "fonts", "layouts", "options", "system", "tcl", "themes", "widgets", "wm"]
from .app import TkApplication, GuiType
from .config import AppConfig, AppFactory
from .exceptions import TclException, TclInterpException, TkException
