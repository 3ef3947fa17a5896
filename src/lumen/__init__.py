"""lumen: a small recursive Monte-Carlo ray tracer.

Subpackages:
    core: vectors, rays, intervals and sampling helpers
    geometry: hittable primitives and the scene list
    materials: scattering models (Lambertian, metal, dielectric, emissive)
    camera: camera configuration, ray generation and the render loop
    renderer: gamma encoding and the PPM writer
"""

__version__ = "0.1.0"
