"""
TreeSet Demo — Examples, shape analysis, and visualizations.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import sys
from functools import total_ordering
from pathlib import Path

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).parent / "src"))

from tree_set import TreeSet
from tree_render import (
    render_pre_order,
    render_in_order,
    render_post_order,
    render_branches,
    render_levels,
)

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

SAMPLE = [5, 3, 8, 1, 4, 7, 9]
HEIGHT_SIZES = [8, 16, 32, 64, 128, 256, 512]
HEIGHT_TRIALS = 30
PRUNING_SIZE = 1023


def build(values):
    tree = TreeSet()
    for value in values:
        tree.add(value)
    return tree


def layout(tree):
    """Place each node at (in-order rank, -depth) and collect parent/child edges."""
    positions = {}
    edges = []
    stack = []
    node, depth = tree.root, 0
    rank = 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        positions[id(node)] = (rank, -depth, node.value)
        rank += 1
        for child in (node.left, node.right):
            if child is not None:
                edges.append((id(node), id(child)))
        node, depth = node.right, depth + 1
    return positions, edges


def draw_tree(ax, tree, title, highlight=None):
    positions, edges = layout(tree)
    for parent, child in edges:
        x0, y0, _ = positions[parent]
        x1, y1, _ = positions[child]
        ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1, zorder=1)
    for x, y, value in positions.values():
        color = "coral" if highlight is not None and value == highlight else "steelblue"
        ax.scatter(x, y, s=400, color=color, zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", color="white", fontsize=9, zorder=3)
    ax.set_title(f"{title} (height {tree.height()})")
    ax.axis("off")


def example_1_basic_operations():
    """Insert, traverse, remove and range-query the sample set."""
    print("=" * 60)
    print("Example 1: Basic Operations")
    print("=" * 60)

    tree = build(SAMPLE)
    print(f"Inserted:   {SAMPLE}")
    print(f"In-order:   {tree.to_list_in_order()}")
    print(f"Pre-order:  {tree.to_list_pre_order()}")
    print(f"Post-order: {tree.to_list_post_order()}")
    print(f"str(tree):  {tree}")
    print(f"add(4) again -> {tree.add(4)}, size = {tree.size()}")
    print(f"contains(7) -> {tree.contains(7)}, contains(6) -> {tree.contains(6)}")

    print("\nPre-order listing:")
    print(render_pre_order(tree), end="")
    print("\nIn-order listing:")
    print(render_in_order(tree), end="")
    print("\nPost-order listing:")
    print(render_post_order(tree), end="")
    print("\nBranches:")
    print(render_branches(tree), end="")
    print("\nLevels:")
    print(render_levels(tree), end="")

    print(f"\nremove(5) -> {tree.remove(5)}")
    print(f"root is now {tree.root.value}, in-order {tree.to_list_in_order()}, size {tree.size()}")
    print(f"subset(3, 8) -> {tree.subset(3, 8)}")
    print(f"subset(8, 3) -> {tree.subset(8, 3)}")
    print(f"subset(4, 4) -> {tree.subset(4, 4)}")

    return tree


def example_2_tree_shapes():
    """Same elements, sorted versus shuffled insertion order."""
    print("\n" + "=" * 60)
    print("Example 2: Insertion Order and Shape")
    print("=" * 60)

    np.random.seed(SEED)
    values = list(range(1, 16))
    shuffled = np.random.permutation(values).tolist()

    chain = build(values)
    bushy = build(shuffled)
    print(f"Sorted insertion   -> height {chain.height()}")
    print(f"Shuffled insertion -> height {bushy.height()} (order {shuffled})")

    fig, axes = plt.subplots(1, 2, figsize=(14, 6))
    draw_tree(axes[0], chain, "Sorted insertion")
    draw_tree(axes[1], bushy, "Shuffled insertion")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_tree_shapes.png", dpi=150)
    plt.close(fig)

    return fig


def example_3_height_growth():
    """Average height of randomly built trees against the degenerate chain."""
    print("\n" + "=" * 60)
    print("Example 3: Height Growth")
    print("=" * 60)

    np.random.seed(SEED)
    mean_heights = []
    std_heights = []
    for n in HEIGHT_SIZES:
        heights = np.array([
            build(np.random.permutation(n).tolist()).height()
            for _ in range(HEIGHT_TRIALS)
        ])
        mean_heights.append(heights.mean())
        std_heights.append(heights.std())
        print(f"n = {n:4d}: mean height {heights.mean():6.2f} ± {heights.std():.2f}")

    sizes = np.array(HEIGHT_SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].errorbar(sizes, mean_heights, yerr=std_heights, marker="o",
                     color="steelblue", label="Random order (mean ± std)")
    axes[0].plot(sizes, np.log2(sizes + 1), "g--", label="log2(n + 1)")
    axes[0].set_xscale("log", base=2)
    axes[0].set_xlabel("n")
    axes[0].set_ylabel("Height")
    axes[0].set_title("Random Insertion Order")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes, sizes, "r-", linewidth=2, label="Sorted order (chain)")
    axes[1].plot(sizes, mean_heights, "o-", color="steelblue", label="Random order")
    axes[1].set_xlabel("n")
    axes[1].set_ylabel("Height")
    axes[1].set_title("Degenerate vs Random")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_growth.png", dpi=150)
    plt.close(fig)

    return fig, mean_heights


@total_ordering
class Counted:
    """Integer wrapper that counts every comparison made against it."""

    comparisons = 0

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        Counted.comparisons += 1
        return self.value == other.value

    def __lt__(self, other):
        Counted.comparisons += 1
        return self.value < other.value

    def __repr__(self):
        return f"Counted({self.value})"


def example_4_subset_pruning():
    """Comparisons spent by subset() as the queried interval widens."""
    print("\n" + "=" * 60)
    print("Example 4: Range Query Pruning")
    print("=" * 60)

    np.random.seed(SEED)
    tree = build(Counted(v) for v in np.random.permutation(PRUNING_SIZE).tolist())

    widths = np.unique(np.geomspace(1, PRUNING_SIZE, num=12).astype(int))
    costs = []
    for width in widths:
        low = (PRUNING_SIZE - width) // 2
        Counted.comparisons = 0
        result = tree.subset(Counted(low), Counted(low + width))
        costs.append(Counted.comparisons)
        print(f"width {width:5d}: {len(result):5d} elements, {Counted.comparisons:6d} comparisons")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(widths, costs, "o-", color="steelblue", label="subset() comparisons")
    ax.axhline(2 * PRUNING_SIZE, color="coral", linestyle="--",
               label="Unpruned walk (2 comparisons per node)")
    ax.set_xscale("log")
    ax.set_xlabel("Interval width")
    ax.set_ylabel("Comparisons")
    ax.set_title(f"Range Query Cost on {PRUNING_SIZE} Shuffled Elements")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_subset_pruning.png", dpi=150)
    plt.close(fig)

    return fig, costs


def example_5_predecessor_delete():
    """Removing a node with two children replaces it by its predecessor."""
    print("\n" + "=" * 60)
    print("Example 5: Two-Child Deletion")
    print("=" * 60)

    values = [50, 30, 70, 20, 40, 60, 80, 35, 45]
    tree = build(values)
    before = tree.copy()
    predecessor = before.subset(before.min(), 50)[-1]
    tree.remove(50)
    print(f"Before: pre-order {before.to_list_pre_order()}")
    print(f"After:  pre-order {tree.to_list_pre_order()}")
    print(f"Predecessor {predecessor} took the root's place")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    draw_tree(axes[0], before, "Before remove(50)", highlight=predecessor)
    draw_tree(axes[1], tree, "After remove(50)", highlight=predecessor)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_predecessor_delete.png", dpi=150)
    plt.close(fig)

    return fig


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "TreeSet", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Ordered Set on an Unbalanced Binary Search Tree", fontsize=20, ha="center")
        fig.text(0.5, 0.35, "Demonstration & Analysis Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")

        summary_text = """
Operations:
  - add / contains / remove, each walking one root-to-leaf path
  - in-order, pre-order and post-order exports
  - subset(min, max) over the half-open interval [min, max)

Observations:
  1. Sorted insertion builds a chain: height equals size
  2. Random insertion keeps height a small multiple of log2(n)
  3. Narrow range queries touch only a few paths of the tree
  4. Two-child removal keeps the node and unlinks its predecessor
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, image in figures_data:
            page = plt.figure(figsize=(11, 8.5))
            page.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = page.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(VIZ_DIR / image))
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 23 + "TREESET DEMO" + " " * 23 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_basic_operations()
    example_2_tree_shapes()
    example_3_height_growth()
    example_4_subset_pruning()
    example_5_predecessor_delete()

    generate_pdf_report([
        ("Example 2: Insertion Order and Shape", "01_tree_shapes.png"),
        ("Example 3: Height Growth", "02_height_growth.png"),
        ("Example 4: Range Query Pruning", "03_subset_pruning.png"),
        ("Example 5: Two-Child Deletion", "04_predecessor_delete.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
