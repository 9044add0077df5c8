"""
Balanced Trees Demo -- Traversal orders, height growth of AVL vs unbalanced
search trees, rotation scenarios, and rotation counts under random workloads.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import logging
import sys
from collections import Counter
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from avl_tree import AVLTree
from binary_search_tree import BinarySearchTree
from counting_search_tree import CountingSearchTree
from tree_errors import ValueAlreadyStored, ValueNotFound

SEED = 42

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

SIZES = [16, 32, 64, 128, 256, 512, 1024, 2048]
RANDOM_OPS = 5000

ROTATION_SCENARIOS = [
    ("Left-Left", [5, 3], 1),
    ("Right-Right", [2, 4], 6),
    ("Right-Left", [2, 1, 6, 4, 7], 3),
    ("Left-Right", [6, 3, 7, 2, 4], 5),
]


class RotationCounter(logging.Handler):
    """Tallies the rotation records emitted by the AVL tree."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.counts = Counter()

    def emit(self, record):
        message = record.getMessage()
        self.counts[message.split(" rotation")[0]] += 1


def _layout(tree):
    """Return node positions (in-order index, -depth) and parent/child edges."""
    positions = {}
    edges = []

    def visit(node, depth, counter):
        if node is None:
            return counter
        counter = visit(node.left, depth + 1, counter)
        positions[id(node)] = (counter, -depth, node.value)
        counter += 1
        counter = visit(node.right, depth + 1, counter)
        for child in (node.left, node.right):
            if child is not None:
                edges.append((id(node), id(child)))
        return counter

    visit(tree._root, 0, 0)
    return positions, edges


def _draw_tree(ax, tree, title, color):
    positions, edges = _layout(tree)
    for parent, child in edges:
        x0, y0, _ = positions[parent]
        x1, y1, _ = positions[child]
        ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1.5, zorder=1)
    for x, y, value in positions.values():
        ax.scatter([x], [y], s=700, color=color, edgecolors=COLORS["dark"], zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", fontsize=11,
                color="white", fontweight="bold", zorder=3)
    ax.set_title(title, fontsize=10)
    ax.axis("off")
    ax.margins(0.25)


# ---------------------------------------------------------------------------
# Example 1: Traversal Orders
# ---------------------------------------------------------------------------
def example_1_traversal_orders():
    """Build each tree from the same values and print both traversal orders."""
    print("=" * 60)
    print("Example 1: Traversal Orders")
    print("=" * 60)

    values = [5, 1, 3, 2, 4]
    for tree_cls in (BinarySearchTree, AVLTree):
        tree = tree_cls()
        for value in values:
            tree.add(value)
        print(f"{tree_cls.__name__}")
        print(f"  L to R: {tree.as_vec()}")
        print(f"  R to L: {tree.as_vec_r_to_l()}")
        print(f"  debug output: {tree!r} {tree}")

    try:
        tree.add(3)
    except ValueAlreadyStored as exc:
        print(f"  add(3) rejected: {exc}")
    try:
        tree.drop_value(9)
    except ValueNotFound as exc:
        print(f"  drop_value(9) rejected: {exc}")

    counting = CountingSearchTree.from_collection([3, 3, 2, 2, 1, 1])
    print("CountingSearchTree")
    print(f"  L to R: {counting.as_vec()} (size={counting.get_size()})")


# ---------------------------------------------------------------------------
# Example 2: Height Growth
# ---------------------------------------------------------------------------
def example_2_height_growth():
    """Compare tree heights for sorted and shuffled input."""
    print("\n" + "=" * 60)
    print("Example 2: Height Growth")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    results = {key: [] for key in ("avl_sorted", "bst_sorted", "avl_random", "bst_random")}

    print(f"{'n':>6} {'AVL sorted':>11} {'BST sorted':>11} {'AVL random':>11} {'BST random':>11}")
    for n in SIZES:
        ordered = list(range(n))
        shuffled = rng.permutation(n).tolist()
        results["avl_sorted"].append(AVLTree.from_collection(ordered).height())
        results["bst_sorted"].append(BinarySearchTree.from_collection(ordered).height())
        results["avl_random"].append(AVLTree.from_collection(shuffled).height())
        results["bst_random"].append(BinarySearchTree.from_collection(shuffled).height())
        print(f"{n:>6} {results['avl_sorted'][-1]:>11} {results['bst_sorted'][-1]:>11} "
              f"{results['avl_random'][-1]:>11} {results['bst_random'][-1]:>11}")

    sizes = np.array(SIZES)
    bound = 1.44 * np.log2(sizes + 2)

    fig, axes = plt.subplots(1, 2, figsize=(13, 5))
    ax = axes[0]
    ax.plot(sizes, results["bst_sorted"], "o-", color=COLORS["red"], label="BST (sorted)")
    ax.plot(sizes, results["avl_sorted"], "o-", color=COLORS["blue"], label="AVL (sorted)")
    ax.set_xlabel("n")
    ax.set_ylabel("height")
    ax.set_title("Sorted input")
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    ax.plot(sizes, results["bst_random"], "o-", color=COLORS["orange"], label="BST (random)")
    ax.plot(sizes, results["avl_random"], "o-", color=COLORS["green"], label="AVL (random)")
    ax.plot(sizes, bound, "--", color=COLORS["dark"], label="1.44 log2(n+2)")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("n")
    ax.set_ylabel("height")
    ax.set_title("Shuffled input")
    ax.legend()
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_growth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/02_height_growth.png")


# ---------------------------------------------------------------------------
# Example 3: Rotation Scenarios
# ---------------------------------------------------------------------------
def example_3_rotation_scenarios():
    """Draw each rotation case before and after the triggering insert."""
    print("\n" + "=" * 60)
    print("Example 3: Rotation Scenarios")
    print("=" * 60)

    fig, axes = plt.subplots(2, len(ROTATION_SCENARIOS), figsize=(16, 7))
    for col, (name, prefix, trigger) in enumerate(ROTATION_SCENARIOS):
        tree = AVLTree.from_collection(prefix)
        _draw_tree(axes[0, col], tree, f"{name}: before add({trigger})", COLORS["orange"])
        tree.add(trigger)
        _draw_tree(axes[1, col], tree, f"after: root={tree._root.value}, height={tree.height()}",
                   COLORS["blue"])
        print(f"  {name:<12} root={tree._root.value} height={tree.height()} "
              f"values={tree.as_vec()}")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_rotation_scenarios.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/03_rotation_scenarios.png")


# ---------------------------------------------------------------------------
# Example 4: Rotation Counts
# ---------------------------------------------------------------------------
def example_4_rotation_counts():
    """Count rotations under a random add/drop workload."""
    print("\n" + "=" * 60)
    print("Example 4: Rotation Counts")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    counter = RotationCounter()
    logger = logging.getLogger("avl_tree")
    previous_level = logger.level
    logger.setLevel(logging.DEBUG)
    logger.addHandler(counter)

    tree: AVLTree[int] = AVLTree()
    heights = []
    rejected = 0
    try:
        for _ in range(RANDOM_OPS):
            value = int(rng.integers(0, 1000))
            try:
                if rng.random() < 0.6:
                    tree.add(value)
                else:
                    tree.drop_value(value)
            except (ValueAlreadyStored, ValueNotFound):
                rejected += 1
            heights.append(tree.height())
    finally:
        logger.removeHandler(counter)
        logger.setLevel(previous_level)

    print(f"  operations: {RANDOM_OPS}, rejected: {rejected}, final size: {tree.get_size()}")
    for kind in ("left", "right", "left-right", "right-left"):
        print(f"  {kind:<11} rotations: {counter.counts[kind]}")
    print(f"  balanced: {tree.is_balanced()}")

    fig, axes = plt.subplots(1, 2, figsize=(13, 5))
    kinds = ["left", "right", "left-right", "right-left"]
    axes[0].bar(kinds, [counter.counts[k] for k in kinds],
                color=[COLORS["blue"], COLORS["green"], COLORS["purple"], COLORS["orange"]])
    axes[0].set_title("Rotations by kind")
    axes[0].set_ylabel("count")

    axes[1].plot(heights, color=COLORS["blue"], linewidth=1)
    axes[1].set_title("Tree height over the workload")
    axes[1].set_xlabel("operation")
    axes[1].set_ylabel("height")
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_rotation_counts.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/04_rotation_counts.png")


def generate_pdf_report():
    """Collect the visualizations into a single PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Balanced Trees", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "AVL rebalancing against plain binary search trees",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "An AVL tree keeps |height(right) - height(left)| <= 1 at every node by\n"
            "rotating on the way back up from each insertion or deletion.\n\n"
            "This demo covers:\n"
            "  2. Height growth on sorted and shuffled input\n"
            "  3. The four rotation cases\n"
            "  4. Rotation counts under a random add/drop workload\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.35, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "02_height_growth.png": "Example 2: Height Growth",
            "03_rotation_scenarios.png": "Example 3: Rotation Scenarios",
            "04_rotation_counts.png": "Example 4: Rotation Counts",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Balanced Trees Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_traversal_orders()
    example_2_height_growth()
    example_3_rotation_scenarios()
    example_4_rotation_counts()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
