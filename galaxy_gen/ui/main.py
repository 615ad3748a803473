"""GUI application using tkinter."""

import logging
import tkinter as tk
from tkinter import ttk, messagebox, colorchooser
from typing import Dict, Optional

from matplotlib.colors import to_hex
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from galaxy_gen.errors import InvalidParameter
from galaxy_gen.generator import make_rng
from galaxy_gen.params import GalaxyParameters
from galaxy_gen.render.manager import RenderManager
from galaxy_gen.render.renderer_3d import Renderer3D
from galaxy_gen.ui.bindings import ParameterBinding, build_bindings

logger = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 33


class GalaxyGenGUI:
    """Main GUI application: parameter panel beside the embedded 3D view."""

    def __init__(self, root, params: Optional[GalaxyParameters] = None, seed: Optional[int] = None):
        self.root = root
        self.root.title("Galaxy Generator")
        self.root.geometry("1200x800")

        self.params = (params or GalaxyParameters()).check_bounds()
        self.figure = Figure(figsize=(8, 8), dpi=100)
        self.host = Renderer3D(figure=self.figure)
        self.manager = RenderManager(self.host, rng=make_rng(seed))
        self.bindings = build_bindings(self._regenerate)
        self.vars: Dict[str, tk.Variable] = {}
        self._entries: Dict[str, ttk.Entry] = {}
        self._swatches: Dict[str, tk.Label] = {}
        self._after_id = None

        self._create_widgets()
        self._setup_layout()
        self._regenerate(self.params)
        self.root.protocol("WM_DELETE_WINDOW", self.close)
        self._schedule_tick()

    def _create_widgets(self):
        """Create GUI widgets."""
        # Control panel (left)
        self.control_frame = ttk.LabelFrame(self.root, text="Galaxy", padding=10)

        for row, binding in enumerate(self.bindings):
            ttk.Label(self.control_frame, text=f"{binding.label}:").grid(row=row, column=0, sticky='w', pady=5)
            if binding.kind == "color":
                self._create_color_row(row, binding)
            else:
                self._create_number_row(row, binding)

        # Status
        self.status_label = ttk.Label(self.control_frame, text="Ready", foreground="green")
        self.status_label.grid(row=len(self.bindings), column=0, columnspan=3, pady=10)

        # 3D view (right)
        self.view_frame = ttk.Frame(self.root)
        self.canvas = FigureCanvasTkAgg(self.figure, master=self.view_frame)

    def _create_number_row(self, row: int, binding: ParameterBinding):
        low, high = binding.bounds
        value = getattr(self.params, binding.field)
        var = tk.DoubleVar(value=value)
        self.vars[binding.field] = var

        scale = ttk.Scale(self.control_frame, from_=low, to=high, variable=var,
                          orient='horizontal', length=180)
        scale.grid(row=row, column=1, pady=5)
        entry = ttk.Entry(self.control_frame, width=10)
        entry.insert(0, self._format(binding, value))
        entry.grid(row=row, column=2, pady=5, padx=(5, 0))

        # Commit only on completed edits, not on every drag tick
        scale.configure(command=lambda v, e=entry, b=binding: self._show_value(e, b, v))
        scale.bind("<ButtonRelease-1>", lambda _evt, b=binding: self._commit(b, self.vars[b.field].get()))
        entry.bind("<Return>", lambda _evt, b=binding, e=entry: self._commit(b, e.get()))
        self._entries[binding.field] = entry

    def _create_color_row(self, row: int, binding: ParameterBinding):
        value = getattr(self.params, binding.field)
        var = tk.StringVar(value=to_hex(value))
        self.vars[binding.field] = var
        swatch = tk.Label(self.control_frame, width=3, bg=to_hex(value), relief='sunken')
        swatch.grid(row=row, column=1, sticky='w', pady=5)
        ttk.Button(self.control_frame, text="Pick…",
                   command=lambda b=binding: self._pick_color(b)).grid(row=row, column=2, pady=5)
        self._swatches[binding.field] = swatch

    def _setup_layout(self):
        """Setup window layout."""
        self.control_frame.pack(side='left', fill='y', padx=10, pady=10)
        self.view_frame.pack(side='left', fill='both', expand=True)
        self.canvas.get_tk_widget().pack(fill='both', expand=True)

    @staticmethod
    def _format(binding: ParameterBinding, value) -> str:
        return f"{int(value)}" if binding.kind == "int" else f"{float(value):.3f}"

    def _show_value(self, entry, binding: ParameterBinding, value):
        entry.delete(0, 'end')
        entry.insert(0, self._format(binding, float(value)))

    def _pick_color(self, binding: ParameterBinding):
        _rgb, hexval = colorchooser.askcolor(color=self.vars[binding.field].get(),
                                             title=binding.label, parent=self.root)
        if hexval:
            self._commit(binding, hexval.lower())

    def _commit(self, binding: ParameterBinding, value):
        """Commit a completed edit; rejected edits revert the widget."""
        try:
            self.params = binding.commit(self.params, value)
        except InvalidParameter as e:
            logger.warning("Rejected %s edit: %s", binding.field, e)
            messagebox.showerror("Invalid parameter", str(e))
            self.status_label.config(text="Rejected", foreground="red")
        self._sync_widgets()

    def _regenerate(self, params: GalaxyParameters):
        self.status_label.config(text="Generating…", foreground="orange")
        self.root.update_idletasks()
        self.manager.regenerate(params)
        self.status_label.config(text=f"{params.count:,} particles", foreground="green")

    def _sync_widgets(self):
        """Show the committed parameters in every widget."""
        for binding in self.bindings:
            value = getattr(self.params, binding.field)
            self.vars[binding.field].set(to_hex(value) if binding.kind == "color" else value)
            if binding.kind == "color":
                self._swatches[binding.field].configure(bg=to_hex(value))
            else:
                self._show_value(self._entries[binding.field], binding, value)

    def _schedule_tick(self):
        self.manager.tick()
        self._after_id = self.root.after(FRAME_INTERVAL_MS, self._schedule_tick)

    def close(self):
        """Stop the frame loop and close the window."""
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None
        self.manager.close()
        self.root.destroy()


def run_gui(params: Optional[GalaxyParameters] = None, seed: Optional[int] = None):
    """Run GUI application."""
    root = tk.Tk()
    GalaxyGenGUI(root, params=params, seed=seed)
    root.mainloop()


if __name__ == '__main__':
    run_gui()
