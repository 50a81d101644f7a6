"""
Binary Search Tree Demo -- Traversal orders, successor deletion, key-changing
updates, and height growth under random vs sorted insertion.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_search_tree import CONTINUE, DONE, BinarySearchTree
from comparable import Item, int_item, string_item

SEED = 42
HEIGHT_SIZES = [16, 32, 64, 128, 256, 512]
HEIGHT_TRIALS = 20

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)


def collect(tree: BinarySearchTree, reverse: bool = False) -> list:
    values = []

    def visitor(value):
        values.append(value)
        return CONTINUE

    if reverse:
        tree.visit_in_reverse(visitor)
    else:
        tree.visit_in_order(visitor)
    return values


def layout(tree: BinarySearchTree):
    """
    Place every node at (in-order index, -depth).

    Returns:
        positions: {id(node): (x, y)}
        labels: {id(node): value}
        edges: list of (parent id, child id)
    """
    positions, labels, edges = {}, {}, []
    stack = []
    node, depth, index = tree.root, 0, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            if node.left is not None:
                edges.append((id(node), id(node.left)))
            if node.right is not None:
                edges.append((id(node), id(node.right)))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        positions[id(node)] = (index, -depth)
        labels[id(node)] = node.value
        index += 1
        node, depth = node.right, depth + 1
    return positions, labels, edges


def draw_tree(ax, tree: BinarySearchTree, title: str, highlight=None):
    positions, labels, edges = layout(tree)
    for parent, child in edges:
        (x0, y0), (x1, y1) = positions[parent], positions[child]
        ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1.5, zorder=1)
    for key, (x, y) in positions.items():
        color = "salmon" if labels[key] == highlight else "lightsteelblue"
        ax.scatter([x], [y], s=900, color=color, edgecolors="black", zorder=2)
        ax.text(x, y, str(labels[key]), ha="center", va="center", fontsize=11, zorder=3)
    ax.set_title(title)
    ax.axis("off")
    if positions:
        xs = [x for x, _ in positions.values()]
        ys = [y for _, y in positions.values()]
        ax.set_xlim(min(xs) - 1, max(xs) + 1)
        ax.set_ylim(min(ys) - 0.7, max(ys) + 0.7)


def example_1_traversal_orders():
    """In-order and reverse-order traversal, with early exit."""
    print("=" * 60)
    print("Example 1: Traversal Orders")
    print("=" * 60)

    tree = BinarySearchTree()
    for letter in ["M", "L", "R"]:
        tree.insert(string_item(letter))

    print(f"In order:   {', '.join(collect(tree))}")
    print(f"In reverse: {', '.join(collect(tree, reverse=True))}")

    visited = []
    tree.visit_in_order(lambda value: visited.append(value) or DONE)
    print(f"Visitor returning DONE on first call visited: {visited}")

    fig, ax = plt.subplots(figsize=(6, 4))
    draw_tree(ax, tree, "Sample tree: in order L, M, R / reverse R, M, L")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_traversal_orders.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_2_insertion_shape():
    """Shape of a tree built from a fixed key sequence."""
    print("\n" + "=" * 60)
    print("Example 2: Insertion Shape")
    print("=" * 60)

    keys = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(int_item(key))

    print(f"Inserted: {keys}")
    print(f"In order: {collect(tree)}")
    print(f"Size: {tree.size()}, height: {tree.height()}")

    fig, ax = plt.subplots(figsize=(9, 5))
    draw_tree(ax, tree, f"Insertion order {keys}")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_insertion_shape.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_3_successor_deletion():
    """Deleting a node with two children via its in-order successor."""
    print("\n" + "=" * 60)
    print("Example 3: Successor Deletion")
    print("=" * 60)

    tree = BinarySearchTree()
    for letter in ["L", "M", "R", "T", "Q"]:
        tree.insert(string_item(letter))

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    draw_tree(axes[0], tree, "Before", highlight="R")
    print(f"Before:        {', '.join(collect(tree))}")

    tree.remove("R")
    print(f"Remove R:      {', '.join(collect(tree))}  (successor T took its place)")
    draw_tree(axes[1], tree, "After removing R (two children)", highlight="T")

    tree.remove("M")
    print(f"Remove M:      {', '.join(collect(tree))}  (single child spliced up)")
    draw_tree(axes[2], tree, "After removing M (one child)")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_successor_deletion.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_4_update_moves_key():
    """An update that changes the ordering key forces remove + re-insert."""
    print("\n" + "=" * 60)
    print("Example 4: Update That Changes the Key")
    print("=" * 60)

    tree = BinarySearchTree()
    tree.insert(int_item(1)).insert(int_item(2))
    tree.insert(Item(3, lambda this, to: this - to, lambda this, with_value: this * 0))

    fig, axes = plt.subplots(1, 2, figsize=(10, 5))
    draw_tree(axes[0], tree, "Before inserting 3 again", highlight=3)
    print(f"Before: {collect(tree)}")

    tree.insert(int_item(3))
    print(f"After inserting 3 again (updater maps 3 -> 0): {collect(tree)}")
    draw_tree(axes[1], tree, "After: stored 3 became 0 and moved", highlight=0)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_update_moves_key.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_5_height_growth():
    """Random insertion keeps height logarithmic; sorted insertion is linear."""
    print("\n" + "=" * 60)
    print("Example 5: Height Growth, Random vs Sorted Insertion")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    random_heights = np.zeros((len(HEIGHT_SIZES), HEIGHT_TRIALS))
    sorted_heights = np.zeros(len(HEIGHT_SIZES))

    for i, n in enumerate(HEIGHT_SIZES):
        for trial in range(HEIGHT_TRIALS):
            tree = BinarySearchTree()
            for key in rng.permutation(n):
                tree.insert(int_item(int(key)))
            random_heights[i, trial] = tree.height()

        tree = BinarySearchTree()
        for key in range(n):
            tree.insert(int_item(key))
        sorted_heights[i] = tree.height()

        print(f"  n={n:4d}  random: {random_heights[i].mean():6.1f} +/- {random_heights[i].std():4.1f}"
              f"   sorted: {sorted_heights[i]:5.0f}   log2(n): {np.log2(n):4.1f}")

    sizes = np.array(HEIGHT_SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].errorbar(sizes, random_heights.mean(axis=1), yerr=random_heights.std(axis=1),
                     marker="o", color="steelblue", capsize=4, label="Random order")
    axes[0].plot(sizes, sorted_heights, "r-s", label="Sorted order")
    axes[0].plot(sizes, np.log2(sizes) + 1, "g--", label=r"$\log_2 n + 1$")
    axes[0].set_xlabel("Number of keys n")
    axes[0].set_ylabel("Tree height")
    axes[0].set_title("Height vs Size")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].errorbar(sizes, random_heights.mean(axis=1), yerr=random_heights.std(axis=1),
                     marker="o", color="steelblue", capsize=4, label="Random order")
    axes[1].plot(sizes, np.log2(sizes) + 1, "g--", label=r"$\log_2 n + 1$")
    axes[1].set_xscale("log", base=2)
    axes[1].set_xlabel("Number of keys n (log scale)")
    axes[1].set_ylabel("Tree height")
    axes[1].set_title("Random Insertion (Log Scale)")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "05_height_growth.png", dpi=150)
    plt.close(fig)

    return fig, random_heights, sorted_heights


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Generate PDF report with a title page and one page per figure."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Binary Search Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Unbalanced, Update-on-Duplicate, Successor Deletion",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Every node's left subtree holds smaller values and its right subtree larger ones.\n"
            "Inserting an equal value updates the stored item; if the update changes its key,\n"
            "the node is removed and re-inserted from the root. Deleting a node with two\n"
            "children copies in its in-order successor and deletes the successor instead.\n"
            r"Search, insert and remove cost $O(h)$; with no rebalancing $h$ ranges from"
            "\n"
            r"$\lceil \log_2(n+1) \rceil$ to $n$."
        )
        ax.text(0.5, 0.42, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_traversal_orders.png": "Example 1: Traversal Orders",
            "02_insertion_shape.png": "Example 2: Insertion Shape",
            "03_successor_deletion.png": "Example 3: Successor Deletion",
            "04_update_moves_key.png": "Example 4: Update That Changes the Key",
            "05_height_growth.png": "Example 5: Height Growth",
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
    print("Binary Search Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_traversal_orders()
    example_2_insertion_shape()
    example_3_successor_deletion()
    example_4_update_moves_key()
    example_5_height_growth()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
