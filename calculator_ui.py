"""
Interfaz gráfica de la calculadora de enteros.

Usa tkinter. El procesamiento se ejecuta en un hilo aparte
para no bloquear la interfaz.
"""

import logging
import threading
import tkinter as tk
from tkinter import font as tkfont

from calculator_engine import CalculatorEngine
from expression_buffer import ERROR_PREFIX, ExpressionBuffer


logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "display_bg": "#181825",
        "num":        "#313244",
        "num_fg":     "#CDD6F4",
        "op":         "#F38BA8",
        "op_fg":      "#1E1E2E",
        "func":       "#45475A",
        "func_fg":    "#CDD6F4",
        "special":    "#585B70",
        "special_fg": "#CDD6F4",
        "equals":     "#89B4FA",
        "equals_fg":  "#1E1E2E",
        "expr_fg":    "#BAC2DE",
        "error_fg":   "#F38BA8",
    }

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)
    #  tipo_color: "num", "op", "func", "special", "equals"
    #  C borra el último carácter, CE vacía la expresión.

    KEYPAD = [
        [("(",  "insert:(",  "func"),    (")", "insert:)", "func"),
         ("^",  "insert:^",  "func"),    ("÷", "insert:÷", "op")],

        [("7",  "insert:7",  "num"), ("8", "insert:8", "num"),
         ("9",  "insert:9",  "num"), ("×", "insert:×", "op")],

        [("4",  "insert:4",  "num"), ("5", "insert:5", "num"),
         ("6",  "insert:6",  "num"), ("−", "insert:−", "op")],

        [("1",  "insert:1",  "num"), ("2", "insert:2", "num"),
         ("3",  "insert:3",  "num"), ("+", "insert:+", "op")],

        [("C",  "backspace", "special"), ("0", "insert:0", "num"),
         ("CE", "clear",     "special"), ("=", "equals",   "equals")],
    ]

    # Teclas físicas aceptadas además de los botones
    TYPED_KEYS = "0123456789+-*/^()"

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else CalculatorEngine()
        self.buffer = ExpressionBuffer(self.engine)
        self._busy = False

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_expr = tkfont.Font(family="Consolas", size=22, weight="bold")
        self._f_btn  = tkfont.Font(family="Segoe UI", size=15)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        # Campo de solo lectura: se escribe con el teclado de la ventana
        self.expr_var = tk.StringVar()
        self.expr_entry = tk.Entry(
            frame, textvariable=self.expr_var, state="readonly",
            font=self._f_expr, fg=self.C["expr_fg"],
            readonlybackground=self.C["display_bg"],
            relief="flat", justify="right", bd=0,
        )
        self.expr_entry.pack(fill="x", pady=(4, 4))

    # ── Teclado numérico / operadores ────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            for c, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda a=action: self._on_key(a),
                )
                btn.grid(row=r, column=c, sticky="nsew", padx=2, pady=2, ipady=8)

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Return>", lambda _e: self._on_key("equals"))
        self.root.bind("<KP_Enter>", lambda _e: self._on_key("equals"))
        self.root.bind("<Escape>", lambda _e: self._on_key("clear"))
        self.root.bind("<BackSpace>", lambda _e: self._on_key("backspace"))
        self.root.bind("<Key>", self._on_typed)

    def _on_typed(self, event):
        if event.char and event.char in self.TYPED_KEYS:
            self._on_key(f"insert:{event.char}")

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, action: str):
        if self._busy:
            return
        if action == "clear":
            self._show(self.buffer.clear())
        elif action == "backspace":
            self._show(self.buffer.backspace())
        elif action == "equals":
            self._calculate()
        elif action.startswith("insert:"):
            self._show(self.buffer.insert(action[7:]))

    def _show(self, text: str):
        is_error = text.startswith(ERROR_PREFIX)
        self.expr_entry.config(fg=self.C["error_fg" if is_error else "expr_fg"])
        self.expr_var.set(text)
        self.expr_entry.xview_moveto(1.0)

    # ── Cálculo en hilo separado ─────────────────────────────────

    def _calculate(self):
        if not self.buffer.text.strip():
            return

        self._busy = True

        def _run():
            try:
                text = self.buffer.evaluate()
            except Exception:
                logger.exception("Fallo inesperado al evaluar")
                text = f"{ERROR_PREFIX}interno"
                self.buffer.clear()
            self.root.after(0, lambda: self._finish(text))

        thread = threading.Thread(target=_run, daemon=True)
        thread.start()

    def _finish(self, text: str):
        self._busy = False
        self._show(text)
