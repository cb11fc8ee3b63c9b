"""Describes the custom menu domain. Centres around the five course slots.

Why is this hard?

- Hosts type whatever they like: "Dessert: tart", "1) soup", "salad, steak".
- Some lines name their course, some only hint at it, some say nothing.
- The menus come back from a language model which may quietly drop the
  host's dish in favour of its own.

So the domain splits the text into ideas, places each idea in a slot, builds
the deterministic variants, and checks whatever the model sends back.
None of it touches the network; the model lives behind `llm_service`.
"""
