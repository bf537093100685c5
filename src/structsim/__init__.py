"""
structsim: structure simulator

A small particle model of how an organization (or a mind) holds its
energy:

- Innovation gives particles kinetic energy
- Discipline pulls them toward a center and closes a container around them
- Too many hard wall impacts build Stress
- Too little motion builds Stagnation
- A level gate unlocks these mechanics one at a time

See DESIGN.md for details.
"""

__version__ = "0.1.0"
