SYNTAX = r"""
graph <TD|LR|TB|RL|BT>      optional, first line only, case-insensitive
%% comment                  ignored

id                          node, label = id
id[label]                   node with label (also id(label), id{label})

a --> b                     directed edge
a <--> b                    bidirected edge
a --- b                     undirected edge
a -->|label| b              any arrow may carry a |label|

id := [A-Za-z0-9_]+
Edge lines declare missing endpoints. A later node line overwrites the label.
""".strip()

EXAMPLE_DIAGRAM = """graph TD
  A[Node A]
  B[Node B]
  C[Node C]
  D[Node D]
  A --> B
  B --> C
  C --> D
  D --> A
  A <--> C
  B -->|0.75| D"""

__all__ = ["SYNTAX", "EXAMPLE_DIAGRAM"]
