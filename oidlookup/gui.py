"""Tkinter editor window hosting the lookup commands."""

from __future__ import annotations

import logging
import pathlib
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import filedialog, messagebox, ttk

from .configuration import OidLookupConfig
from .errors import OidLookupError
from .extraction import word_at
from .lookup import OidLookup
from .structures import ResultBuffer

logger = logging.getLogger(__name__)


class TkEditorContext:
    """Reads the line and cursor from a Tk text widget."""

    def __init__(self, text: tk.Text) -> None:
        self.text = text

    def current_line(self) -> str:
        return self.text.get("insert linestart", "insert lineend")

    def cursor_index(self) -> int:
        # Tk columns are already 0-based character offsets.
        return int(self.text.index("insert").split(".")[1])

    def current_word(self) -> str:
        return word_at(self.current_line(), self.cursor_index())


class TkBufferHost:
    """Shows the result buffer in a read-only pane below the editor."""

    def __init__(self, frame: ttk.LabelFrame, pane: tk.Text) -> None:
        self.frame = frame
        self.pane = pane
        self.current: Optional[ResultBuffer] = None

    def has_buffer(self, name: str) -> bool:
        return self.current is not None and self.current.name == name

    def delete_buffer(self, name: str) -> None:
        if not self.has_buffer(name):
            return
        self.current = None
        self.pane.config(state="normal")
        self.pane.delete("1.0", "end")
        self.pane.config(state="disabled")
        self.frame.config(text="")

    def create_buffer(self, name: str, height: int) -> ResultBuffer:
        self.current = ResultBuffer(name=name, height=height)
        self.frame.config(text=name)
        self.pane.config(height=height, wrap="none", state="normal")
        return self.current

    def lock_buffer(self, buffer: ResultBuffer) -> None:
        buffer.lock()
        self.pane.config(state="disabled")

    def show_buffer(self, buffer: ResultBuffer) -> None:
        self.pane.config(state="normal")
        self.pane.delete("1.0", "end")
        self.pane.insert("1.0", "\n".join(buffer.lines))
        self.pane.config(state="normal" if buffer.writable else "disabled")
        self.pane.see("1.0")


class OidLookupGUI:
    """Encapsulates the Tkinter UI and the lookup workflow."""

    def __init__(
        self,
        *,
        root: tk.Tk,
        settings: OidLookupConfig,
        path: Optional[str] = None,
    ) -> None:
        self.root = root
        self.settings = settings
        self.path = path

        self.status_var = tk.StringVar(
            value="Place the cursor on an OID or a MIB label and choose a command."
        )

        self._build_ui()
        self.lookup = OidLookup(
            settings=settings,
            context=TkEditorContext(self.editor),
            host=TkBufferHost(self.result_frame, self.result_pane),
        )
        self._bind_keys()

        if path:
            self._load(pathlib.Path(path))

    def _build_ui(self) -> None:
        """Construct the Tkinter layout."""

        self.root.title("OID Lookup")
        self.root.geometry("800x600")

        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Open…", command=self._choose_file)
        file_menu.add_separator()
        file_menu.add_command(label="Quit", command=self.root.destroy)
        menubar.add_cascade(label="File", menu=file_menu)

        snmp_menu = tk.Menu(menubar, tearoff=False)
        snmp_menu.add_command(label="Translate under cursor", command=self.on_infer)
        snmp_menu.add_command(label="Translate OID", command=self.on_oid)
        snmp_menu.add_command(label="Translate label", command=self.on_label)
        snmp_menu.add_separator()
        snmp_menu.add_command(label="List all OIDs", command=self.on_list_all)
        menubar.add_cascade(label="SNMP", menu=snmp_menu)
        self.root.config(menu=menubar)

        main_frame = ttk.Frame(self.root, padding=10)
        main_frame.grid(row=0, column=0, sticky="nsew")
        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)
        main_frame.columnconfigure(0, weight=1)
        main_frame.rowconfigure(0, weight=1)

        self.editor = tk.Text(main_frame, undo=True, wrap="none")
        self.editor.grid(row=0, column=0, sticky="nsew")

        self.result_frame = ttk.LabelFrame(main_frame, text="", padding=5)
        self.result_frame.grid(row=1, column=0, sticky="we", pady=(10, 0))
        self.result_frame.columnconfigure(0, weight=1)
        self.result_pane = tk.Text(
            self.result_frame,
            height=self.settings.buffer_size,
            wrap="none",
            state="disabled",
        )
        self.result_pane.grid(row=0, column=0, sticky="we")

        ttk.Label(main_frame, textvariable=self.status_var, foreground="#555").grid(
            row=2, column=0, sticky="w", pady=(5, 0)
        )

    def _bind_keys(self) -> None:
        binding = self.settings.key_binding
        if not binding:
            return
        try:
            self.editor.bind(binding, self._on_infer_event)
        except tk.TclError as exc:
            logger.warning("Ignoring invalid key binding %r: %s", binding, exc)

    def _choose_file(self) -> None:
        selection = filedialog.askopenfilename(
            title="Open a file",
            filetypes=[
                ("MIB files", "*.mib *.my *.txt"),
                ("All files", "*.*"),
            ],
        )
        if selection:
            self._load(pathlib.Path(selection))

    def _load(self, path: pathlib.Path) -> None:
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            messagebox.showerror("OID Lookup", f"Could not open {path}: {exc}")
            return
        self.editor.delete("1.0", "end")
        self.editor.insert("1.0", content)
        self.editor.mark_set("insert", "1.0")
        self.status_var.set(f"Loaded {path}")

    def _on_infer_event(self, event: Any) -> str:
        self.on_infer()
        return "break"

    def on_infer(self) -> None:
        self._run(self.lookup.translate_infer)

    def on_oid(self) -> None:
        self._run(self.lookup.translate_by_oid)

    def on_label(self) -> None:
        self._run(self.lookup.translate_by_label)

    def on_list_all(self) -> None:
        self._run(self.lookup.list_all_oids)

    def _run(self, command: Callable[[], ResultBuffer]) -> None:
        """Run a lookup on the Tk thread; the translator call blocks."""

        self.root.config(cursor="watch")
        self.root.update_idletasks()
        try:
            buffer = command()
        except OidLookupError as exc:
            self.status_var.set(str(exc))
            messagebox.showinfo("OID Lookup", str(exc))
            return
        finally:
            self.root.config(cursor="")
        self.status_var.set(f"{len(buffer.lines)} lines in {buffer.name}")


def launch_gui(*, settings: OidLookupConfig, path: Optional[str] = None) -> int:
    """Entry point called from the CLI when --gui is provided."""

    root = tk.Tk()
    OidLookupGUI(root=root, settings=settings, path=path)
    root.mainloop()
    return 0
