import networkx as nx
import matplotlib.pyplot as plt
from digraph_lib import empty

# Build a small weighted graph using digraph_lib
g = empty("vertices")
g.set("A", "B", 4)
g.set("A", "C", 2)
g.set("C", "B", 1)
g.set("B", "D", 5)
g.set("D", "D", 3)  # self-loop
g.add("E")  # isolated vertex

# Convert to a networkx DiGraph through the public Graph operations only
G = nx.DiGraph()
G.add_nodes_from(g.vertices())
for source in g.vertices():
    for target, weight in g.targets(source).items():
        G.add_edge(source, target, weight=weight)

print(g.describe())

# Draw the graph using circular layout
pos = nx.circular_layout(G)
plt.figure(figsize=(6, 6))
nx.draw(
    G,
    pos,
    with_labels=True,
    node_color="lightblue",
    edge_color="gray",
    node_size=800,
    font_size=10,
    font_weight="bold",
    arrows=True,
)
nx.draw_networkx_edge_labels(G, pos, edge_labels=nx.get_edge_attributes(G, "weight"))
plt.title("Weighted Directed Graph (networkx)")
plt.tight_layout()
plt.show()
