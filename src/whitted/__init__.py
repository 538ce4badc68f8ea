"""Whitted-style recursive ray tracer.

This package renders scenes of spheres and planes with Phong lighting, hard
shadows, mirror reflection and refraction, in parallel across CPU processes:
- Recursive shading with a bounded depth budget
- Refractive indices resolved from a containment list of nested objects
- Schlick's Fresnel approximation for surfaces both reflective and transparent
- Stripe and 3D checker patterns
- YAML scene files, PPM/PNG export and a Matplotlib preview

Subpackages:
    core: Tuples, colours, transforms, rays, shading and the render loop
    geometry: Sphere and plane primitives
    materials: Phong materials and patterns
    scene: World container, YAML loader and demo scene
    camera: Pinhole camera with ray generation
    preview: Image export and preview utilities
"""

__version__ = "0.1.0"
