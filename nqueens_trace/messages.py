"""Step message templates.

The texts are the wire contract with the existing replay front-end, which is
written in Indonesian and detects a solved board by searching the message for
``SUCCESS_MARKER`` (depth-first, breadth-first) or ``OPTIMAL_SUCCESS_MARKER``
(branch-and-bound). Keep the wording byte for byte.
"""

from __future__ import annotations

SUCCESS_MARKER = "SOLUSI DITEMUKAN"
OPTIMAL_SUCCESS_MARKER = "SOLUSI OPTIMAL DITEMUKAN"
SUCCESS_MARKERS = (SUCCESS_MARKER, OPTIMAL_SUCCESS_MARKER)

# Depth-first search
DFS_START = (
    "Memulai DFS untuk {size}-Queens. "
    "DFS menggunakan pendekatan depth-first dengan backtracking."
)
DFS_SOLVED = (
    "✓ SOLUSI DITEMUKAN! Semua {size} queens berhasil ditempatkan "
    "tanpa saling menyerang."
)
DFS_CHECK = (
    "DFS: Memeriksa posisi ({row}, {col}) - "
    "Mengecek apakah aman untuk menempatkan queen."
)
DFS_PLACE = (
    "✓ Queen ditempatkan di ({row}, {col}) - "
    "Posisi aman! Lanjut ke baris berikutnya."
)
DFS_BACKTRACK = (
    "✗ BACKTRACK dari ({row}, {col}) - "
    "Tidak ada solusi di jalur ini, mencoba posisi lain."
)
DFS_UNSAFE = (
    "✗ Posisi ({row}, {col}) tidak aman - "
    "Queen akan diserang oleh queen lain."
)

# Breadth-first search
BFS_START = (
    "Memulai BFS untuk {size}-Queens. "
    "BFS mengeksplorasi semua kemungkinan level demi level."
)
BFS_SOLVED = (
    "✓ SOLUSI DITEMUKAN dengan BFS! Semua {size} queens berhasil ditempatkan."
)
BFS_CHECK = "BFS Level {row}: Memeriksa posisi ({row}, {col})"
BFS_PLACE = (
    "✓ Queen ditempatkan di ({row}, {col}) - "
    "Ditambahkan ke queue untuk eksplorasi level berikutnya."
)
BFS_UNSAFE = "✗ Posisi ({row}, {col}) tidak valid - Diabaikan dalam BFS."

# Branch and bound
BNB_START = (
    "Memulai Branch and Bound untuk {size}-Queens. "
    "Menggunakan bounding function untuk memangkas cabang yang tidak optimal."
)
BNB_PRUNE_NODE = (
    "✂️ PRUNING: Node dengan bound {bound} dipangkas karena >= minCost {min_cost}"
)
BNB_SOLVED = "🎉 SOLUSI OPTIMAL DITEMUKAN! Cost: {cost}, Bound: {bound}"
BNB_CHECK = "B&B Level {row}: Evaluasi posisi ({row}, {col})"
BNB_BOUND = "📊 Node baru: Cost={cost}, Bound={bound}. {verdict}"
BNB_BOUND_KEEP = "Ditambahkan ke queue"
BNB_BOUND_DROP = "Akan dipangkas"
BNB_PLACE = (
    "✓ Queen ditempatkan di ({row}, {col}) - "
    "Node ditambahkan ke priority queue"
)
BNB_PRUNE_CHILD = (
    "✂️ Posisi ({row}, {col}) dipangkas: bound {bound} >= minCost {min_cost}"
)


def format_cost(value: float) -> str:
    """Render a best-cost value the way the front-end prints numbers."""
    if value == float("inf"):
        return "Infinity"
    return str(int(value))
