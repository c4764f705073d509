# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

import random

from brush3d.brush import Brush
from brush3d.geom import Plane, as_pt, normalize

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from mpl_toolkits.mplot3d.art3d import Poly3DCollection


def generate_random_planes(n: int, radius: float = 1.0):
    """
    Куб [-r, r]^3 + n випадкових площин, що зрізають його кути/ребра.
    Кожна площина проходить на відстані 0.6..0.95 * r√3 від центру,
    тож brush лишається обмеженим і непорожнім.
    """
    planes = Brush.box((radius, radius, radius)).planes
    planes = list(planes)
    for _ in range(n):
        normal = normalize(as_pt((random.uniform(-1, 1), random.uniform(-1, 1), random.uniform(-1, 1))))
        planes.append(Plane(normal, radius * random.uniform(0.6, 0.95) * 3 ** 0.5))
    return planes


def parse_planes_from_text(text: str):
    """
    Парсить площини з багаторядкового тексту.
    Кожен рядок: nx ny nz d або nx, ny, nz, d. Нормаль нормується.
    Повертає список Plane.
    """
    planes = []
    lines = text.splitlines()
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue  # пропускаємо пусті рядки і коментарі
        line = line.replace(",", " ")
        parts = line.split()
        if len(parts) != 4:
            raise ValueError(f"Рядок {lineno}: очікується 4 числа, отримано: {len(parts)}")
        try:
            nx, ny, nz, d = map(float, parts)
        except ValueError:
            raise ValueError(f"Рядок {lineno}: не вдалось прочитати числа '{line}'")
        try:
            n = normalize(as_pt((nx, ny, nz)))
        except ValueError:
            raise ValueError(f"Рядок {lineno}: нульова нормаль")
        planes.append(Plane(n, d))
    if len(planes) < 4:
        raise ValueError("Потрібно щонайменше 4 площини для обмеженого brush'а.")
    return planes


class BrushApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Brush Builder")
        self.geometry("800x650")

        # сюди покладемо Figure/Canvas
        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Режим вводу площин")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")

        random_rb = ttk.Radiobutton(
            mode_frame,
            text="Куб + випадкові зрізи",
            variable=self.input_mode,
            value="random",
            command=self._update_mode_state,
        )
        random_rb.grid(row=0, column=0, sticky="w", padx=5, pady=2)

        manual_rb = ttk.Radiobutton(
            mode_frame,
            text="Ручне введення площин",
            variable=self.input_mode,
            value="manual",
            command=self._update_mode_state,
        )
        manual_rb.grid(row=0, column=1, sticky="w", padx=5, pady=2)

        # --- Параметри ---
        input_frame = ttk.LabelFrame(main, text="Параметри")
        input_frame.pack(fill="x", pady=5)

        ttk.Label(input_frame, text="Кількість випадкових зрізів:").grid(
            row=0, column=0, sticky="w", padx=5, pady=5
        )
        self.n_entry = ttk.Entry(input_frame, width=10)
        self.n_entry.insert(0, "3")
        self.n_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        ttk.Label(input_frame, text="Допуск eps (0 — точне порівняння):").grid(
            row=1, column=0, sticky="w", padx=5, pady=5
        )
        self.eps_entry = ttk.Entry(input_frame, width=10)
        self.eps_entry.insert(0, "1e-9")
        self.eps_entry.grid(row=1, column=1, sticky="w", padx=5, pady=5)

        # --- Поле для ручного вводу ---
        manual_frame = ttk.LabelFrame(main, text="Ручне введення (одна площина - один рядок: nx ny nz d)")
        manual_frame.pack(fill="both", expand=True, pady=5)

        self.planes_text = tk.Text(manual_frame, height=6, wrap="none")
        self.planes_text.pack(fill="both", expand=True, padx=5, pady=5)

        # Підказка
        self.planes_text.insert(
            "1.0",
            "# Приклад (одиничний куб):\n"
            "1 0 0 0.5\n"
            "0 1 0 0.5\n"
            "0 0 1 0.5\n"
            "-1 0 0 0.5\n"
            "0 -1 0 0.5\n"
            "0 0 -1 0.5\n"
        )

        # --- Кнопка запуску ---
        run_btn = ttk.Button(main, text="Побудувати brush", command=self.run_pipeline)
        run_btn.pack(fill="x", pady=10)

        # --- Підсумок побудови (brush.off пишеться в поточну директорію) ---
        self.status_var = tk.StringVar(value="—")
        ttk.Label(main, textvariable=self.status_var).pack(fill="x", pady=5)

        # --- Фрейм для 3D-графіка ---
        plot_frame = ttk.LabelFrame(main, text="3D візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 3))
        self.ax = self.fig.add_subplot(111, projection="3d")
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        """
        Вмикаємо/вимикаємо поля залежно від режиму вводу.
        """
        mode = self.input_mode.get()
        if mode == "random":
            self.n_entry.configure(state="normal")
        else:  # manual
            self.n_entry.configure(state="disabled")

    def update_plot(self, pts, edges, polys):
        """
        Перемалювати 3D-графік: напівпрозорі грані + каркас.
        """
        self.ax.clear()

        if not pts:
            self.ax.set_title("Порожній brush")
            self.canvas.draw()
            return

        faces = [[tuple(v) for v in p.verts] for p in polys if not p.is_degenerate()]
        self.ax.add_collection3d(Poly3DCollection(faces, alpha=0.25, edgecolor="none"))

        for a, b in edges:
            pa, pb = pts[a], pts[b]
            self.ax.plot(
                [pa.x, pb.x],
                [pa.y, pb.y],
                [pa.z, pb.z],
                linewidth=0.8,
                color="black",
            )

        # однакові масштаби: куб навколо bbox вершин
        lo = [min(c) for c in zip(*pts)]
        hi = [max(c) for c in zip(*pts)]
        half = 0.5 * (max(h - l for l, h in zip(lo, hi)) or 1.0)
        mids = [0.5 * (l + h) for l, h in zip(lo, hi)]
        for set_lim, m in zip((self.ax.set_xlim, self.ax.set_ylim, self.ax.set_zlim), mids):
            set_lim(m - half, m + half)

        self.ax.set_xlabel("X")
        self.ax.set_ylabel("Y")
        self.ax.set_zlabel("Z")
        self.ax.set_title("Brush (faces + edges)")

        self.canvas.draw()

    def run_pipeline(self):
        mode = self.input_mode.get()

        try:
            eps = float(self.eps_entry.get())
            if eps < 0:
                raise ValueError
        except ValueError:
            messagebox.showerror("Помилка", "eps має бути невід’ємним числом.")
            return

        # --- Вибір джерела площин ---
        if mode == "random":
            try:
                n = int(self.n_entry.get())
                if n < 0:
                    raise ValueError
            except ValueError:
                messagebox.showerror("Помилка", "Кількість зрізів має бути невід’ємним цілим числом.")
                return
            planes = generate_random_planes(n)
        else:  # manual
            raw_text = self.planes_text.get("1.0", "end").strip()
            if not raw_text:
                messagebox.showerror("Помилка", "Введіть хоча б одну площину у текстове поле.")
                return
            try:
                planes = parse_planes_from_text(raw_text)
            except ValueError as e:
                messagebox.showerror("Помилка парсингу площин", str(e))
                return

        try:
            brush = Brush(planes, eps=eps)
            pts, edges = brush.points_edges()
            polys = brush.polygons()
            report = brush.validate()

            with open("brush.off", "w", encoding="utf-8") as f:
                f.write(brush.to_off())

            self.update_plot(pts, edges, polys)

        except Exception as e:
            messagebox.showerror("Помилка виконання", str(e))
            return

        # --- Рядок стану ---
        ok = not (report["bad_edges"] or report["bad_winding"] or report["off_plane"]) and report["euler"] == 2
        self.status_var.set(
            f"V={len(pts)}  E={len(edges)}  F={report['faces']}  "
            + ("OK" if ok else "є проблеми (див. консоль)")
        )

        print("VALIDATION:", report)


if __name__ == "__main__":
    app = BrushApp()
    app.mainloop()
