from .sketch import Sketch

SQUARE = [(10.0, 10.0), (10.0, 40.0), (40.0, 40.0), (40.0, 10.0)]


def build_demo_sketch() -> Sketch:
    """Open square v0-v1-v2-v3 with a fixed length on the last side and a
    fixed angle at v1."""

    sketch = Sketch()
    vertices = [sketch.add_vertex(pos) for pos in SQUARE]
    edges = [sketch.add_edge(a, b) for a, b in zip(vertices, vertices[1:])]
    sketch.add_length_constraint(edges[2])
    sketch.add_angle_constraint(edges[0], edges[1])
    return sketch


def _describe(label, response):
    print(f"{label}: state={response.state.value}")
    if response.new_pos is not None:
        print(f"  new position: {response.new_pos}")


def run():
    sketch = build_demo_sketch()

    _describe("drag v3 to (60, 0)", sketch.drag_vertex(3, SQUARE[3], (60.0, 0.0)))
    _describe("drag v0 to (0, 5)", sketch.drag_vertex(0, SQUARE[0], (0.0, 5.0)))
    _describe("drag v1 to (20, 50)", sketch.drag_vertex(1, SQUARE[1], (20.0, 50.0)))

    v2 = sketch.get_vertex(2).position
    _describe("drag e2 right by 5", sketch.drag_edge(2, v2, (v2[0] + 5.0, v2[1])))

    print("Final vertices:")
    for handle, vertex in sketch.store.vertices():
        print(f"  v{handle}: ({vertex.position[0]:.3f}, {vertex.position[1]:.3f})")


if __name__ == "__main__":
    run()
