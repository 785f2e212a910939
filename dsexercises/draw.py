import matplotlib.pyplot as plt

less_color = 'g'
pivot_color = 'r'
rest_color = (0.8, 0.8, 0.8)


def draw_partition(ax, values, pivot_id):
    colors = []
    for i in range(len(values)):
        if i < pivot_id:
            colors.append(less_color)
        elif i == pivot_id:
            colors.append(pivot_color)
        else:
            colors.append(rest_color)

    ax.bar(range(len(values)), values, color = colors)
    ax.set_title(f'pivot {values[pivot_id]} at position {pivot_id}')


# in-order position of every node, x grows left to right, y with the depth

def tree_layout(tree):
    layout = []
    stack = []
    node = tree
    depth = 0

    while stack or node is not None:
        if node is not None:
            stack.append((node, depth))
            node = node.left
            depth += 1
        else:
            node, depth = stack.pop()
            layout.append((node, len(layout), depth))
            node = node.right
            depth += 1
    return layout


def draw_tree(ax, tree):
    layout = tree_layout(tree)
    pos = {id(node): (x, -depth) for node, x, depth in layout}

    for node, x, depth in layout:
        for child in (node.left, node.right):
            if child is not None:
                cx, cy = pos[id(child)]
                ax.plot([x, cx], [-depth, cy], color = 'k', linewidth = 0.8)

    ax.scatter([x for _, x, _ in layout], [-depth for _, _, depth in layout], color = pivot_color, zorder = 2)

    for node, x, depth in layout:
        ax.annotate(str(node.value), (x, -depth), textcoords = 'offset points', xytext = (0, 6), ha = 'center')

    lowest = min(-depth for _, _, depth in layout)
    ax.set_title('size: ' + str(tree.size))
    ax.set_ylim(lowest - 1, 1)


if __name__ == '__main__':
    import random
    from dsexercises.partition import partition
    from dsexercises.random_tree import build

    values = [random.randint(0, 100) for _ in range(30)]
    pivot_id = partition(values)

    fig, axs = plt.subplots(2)
    draw_partition(axs[0], values, pivot_id)
    draw_tree(axs[1], build(40))
    plt.show()
