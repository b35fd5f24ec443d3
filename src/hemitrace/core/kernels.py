"""Taichi kernel backend for full-resolution renders.

The pure-Python render loop is the reference implementation but traces
millions of Python-level rays at the default 51x51 sample grid. This module
runs the same estimator inside a Taichi kernel:

- The scene is uploaded into Taichi fields as a structure of arrays. All
  primitives share one table in insertion order (kind, vector parameter,
  scalar parameter, material index) so nearest-hit tie-breaking matches
  ``Scene.nearest_hit``.
- Materials are deduplicated by identity into a second table (kind, base
  colour, emissiveness).
- The hemisphere directions come from ``hemitrace.core.sampling``, so both
  backends integrate over exactly the same sample set.

The pixel loop is serialised with ``ti.loop_config(serialize=True)``: the
kernel is compiled, not threaded. Use ``ti.init(arch=ti.cpu,
default_fp=ti.f64)`` for results that match the Python backend to the
rounding of the final byte.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from hemitrace.core.kernels import KernelRenderer
    >>> from hemitrace.scene.studio import create_studio_scene
    >>>
    >>> scene, camera = create_studio_scene()
    >>> image = KernelRenderer(camera, scene).render()  # (256, 256, 3) uint8
"""

import logging
from enum import IntEnum

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from hemitrace.camera.pinhole import PinholeCamera
from hemitrace.core.integrator import DEFAULT_SAMPLES_PER_AXIS, SURFACE_EPSILON
from hemitrace.core.sampling import hemisphere_directions
from hemitrace.core.vector import UnitNormal
from hemitrace.geometry.plane import PARALLEL_EPSILON, Plane
from hemitrace.geometry.sphere import Sphere
from hemitrace.materials.diffuse import DiffuseMaterial
from hemitrace.materials.emissive import EmissiveMaterial
from hemitrace.preview.export import image_to_uint8
from hemitrace.scene.scene import Scene
from hemitrace.utils import timed

logger = logging.getLogger(__name__)

# Type alias for 3D vectors
vec3 = tm.vec3


class PrimitiveKind(IntEnum):
    """Primitive kinds stored in the primitive table."""

    SPHERE = 0
    PLANE = 1


class MaterialKind(IntEnum):
    """Material kinds stored in the material table."""

    DIFFUSE = 0
    EMISSIVE = 1


# Plain ints for use inside kernels
_SPHERE = int(PrimitiveKind.SPHERE)
_EMISSIVE = int(MaterialKind.EMISSIVE)


@ti.data_oriented
class KernelRenderer:
    """Renders a scene with the one-bounce diffuse estimator in a Taichi kernel.

    The scene and camera are uploaded at construction; later changes to the
    scene are not seen. ``ti.init`` must have been called first.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        samples_per_axis: Hemisphere grid resolution along each axis.
    """

    def __init__(
        self,
        camera: PinholeCamera,
        scene: Scene,
        samples_per_axis: int = DEFAULT_SAMPLES_PER_AXIS,
    ) -> None:
        """Upload the camera, scene and sample directions into Taichi fields.

        Args:
            camera: Camera generating one primary ray per pixel.
            scene: The scene to render.
            samples_per_axis: Number of grid values per axis.

        Raises:
            ValueError: If samples_per_axis is less than 2.
            TypeError: If the scene holds a primitive or material type the
                kernel cannot represent.
        """
        if samples_per_axis < 2:
            raise ValueError(f"samples_per_axis must be at least 2, got {samples_per_axis}")

        self._width, self._height = camera.resolution
        self._samples_per_axis = samples_per_axis

        self._setup_camera(camera)
        self._upload_scene(scene)
        self._upload_directions(hemisphere_directions(samples_per_axis))

        self._colors = ti.Vector.field(3, dtype=float, shape=(self._width, self._height))

        logger.info(
            "uploaded %d primitives, %d materials and %d sample directions",
            self._num_primitives[None],
            self._num_materials,
            self._num_samples[None],
        )

    # =========================================================================
    # Upload (Python-side, called once per renderer)
    # =========================================================================

    def _setup_camera(self, camera: PinholeCamera) -> None:
        self._camera_origin = ti.Vector.field(3, dtype=float, shape=())
        self._screen_lo = ti.Vector.field(3, dtype=float, shape=())
        self._pixel_step = ti.Vector.field(3, dtype=float, shape=())

        self._camera_origin[None] = list(camera.position)
        self._screen_lo[None] = list(camera.screen[0])
        self._pixel_step[None] = list(camera.pixel_step)

    def _upload_scene(self, scene: Scene) -> None:
        materials = scene.materials
        material_index = {id(material): i for i, material in enumerate(materials)}

        # Fields cannot be empty; unused slots are never read
        primitive_capacity = max(len(scene), 1)
        material_capacity = max(len(materials), 1)

        self._primitive_kinds = ti.field(dtype=ti.i32, shape=primitive_capacity)
        self._primitive_vectors = ti.Vector.field(3, dtype=float, shape=primitive_capacity)
        self._primitive_scalars = ti.field(dtype=float, shape=primitive_capacity)
        self._primitive_materials = ti.field(dtype=ti.i32, shape=primitive_capacity)
        self._num_primitives = ti.field(dtype=ti.i32, shape=())

        self._material_kinds = ti.field(dtype=ti.i32, shape=material_capacity)
        self._material_colors = ti.Vector.field(3, dtype=float, shape=material_capacity)
        self._material_emissiveness = ti.field(dtype=float, shape=material_capacity)

        for i, obj in enumerate(scene):
            primitive = obj.primitive
            if isinstance(primitive, Sphere):
                self._primitive_kinds[i] = int(PrimitiveKind.SPHERE)
                self._primitive_vectors[i] = list(primitive.center)
                self._primitive_scalars[i] = primitive.radius
            elif isinstance(primitive, Plane):
                self._primitive_kinds[i] = int(PrimitiveKind.PLANE)
                self._primitive_vectors[i] = list(primitive.normal)
                self._primitive_scalars[i] = primitive.distance_to_origin
            else:
                raise TypeError(
                    f"Unsupported primitive for kernel rendering: {type(primitive).__name__}"
                )
            self._primitive_materials[i] = material_index[id(obj.material)]
        self._num_primitives[None] = len(scene)

        for i, material in enumerate(materials):
            if isinstance(material, DiffuseMaterial):
                self._material_kinds[i] = int(MaterialKind.DIFFUSE)
                self._material_colors[i] = list(material.color)
                self._material_emissiveness[i] = 0.0
            elif isinstance(material, EmissiveMaterial):
                self._material_kinds[i] = int(MaterialKind.EMISSIVE)
                self._material_colors[i] = [0.0, 0.0, 0.0]
                self._material_emissiveness[i] = material.emissiveness
            else:
                raise TypeError(
                    f"Unsupported material for kernel rendering: {type(material).__name__}"
                )
        self._num_materials = len(materials)

    def _upload_directions(self, directions: tuple[UnitNormal, ...]) -> None:
        self._directions = ti.Vector.field(3, dtype=float, shape=len(directions))
        self._num_samples = ti.field(dtype=ti.i32, shape=())
        for i, direction in enumerate(directions):
            self._directions[i] = list(direction)
        self._num_samples[None] = len(directions)

    # =========================================================================
    # Intersection (Taichi functions)
    # =========================================================================

    @ti.func
    def _intersect(self, i: ti.i32, origin: vec3, direction: vec3):
        """Intersect primitive i; returns (hit, t) with hit 1 on a hit."""
        hit = 0
        t = 0.0
        if self._primitive_kinds[i] == _SPHERE:
            l = self._primitive_vectors[i] - origin
            tca = tm.dot(l, direction)
            if tca >= 0.0:
                d2 = tm.dot(l, l) - tca * tca
                radius2 = self._primitive_scalars[i] * self._primitive_scalars[i]
                if d2 <= radius2:
                    thc = ti.sqrt(radius2 - d2)
                    t0 = tca - thc
                    t1 = tca + thc
                    if t0 > t1:
                        tmp = t0
                        t0 = t1
                        t1 = tmp
                    if t0 < 0.0:
                        t0 = t1
                    if t0 >= 0.0:
                        hit = 1
                        t = t0
        else:
            normal = self._primitive_vectors[i]
            denom = tm.dot(normal, direction)
            if ti.abs(denom) > PARALLEL_EPSILON:
                plane_center = normal * self._primitive_scalars[i]
                t_plane = tm.dot(plane_center - origin, normal) / denom
                if t_plane > 0.0:
                    hit = 1
                    t = t_plane
        return hit, t

    @ti.func
    def _nearest_hit(self, origin: vec3, direction: vec3):
        """Linear scan in insertion order; returns (index, t), index -1 on a miss."""
        nearest = -1
        nearest_t = 0.0
        for i in range(self._num_primitives[None]):
            hit, t = self._intersect(i, origin, direction)
            if hit == 1:
                if nearest < 0 or t < nearest_t:
                    nearest = i
                    nearest_t = t
        return nearest, nearest_t

    @ti.func
    def _surface_normal(self, i: ti.i32, point: vec3) -> vec3:
        normal = self._primitive_vectors[i]
        if self._primitive_kinds[i] == _SPHERE:
            normal = tm.normalize(point - self._primitive_vectors[i])
        return normal

    # =========================================================================
    # Shading (Taichi functions)
    # =========================================================================

    @ti.func
    def _total_emission(self, material: ti.i32, sampled_color: vec3) -> vec3:
        result = sampled_color
        if self._material_kinds[material] == _EMISSIVE:
            result = sampled_color * self._material_emissiveness[material]
        return result

    @ti.func
    def _orthonormal_basis(self, normal: vec3):
        helper = vec3(1.0, 0.0, 0.0)
        if ti.abs(normal.x) > 0.9:
            helper = vec3(0.0, 1.0, 0.0)
        tangent = tm.normalize(tm.cross(helper, normal))
        bitangent = tm.normalize(tm.cross(normal, tangent))
        return tangent, bitangent

    @ti.func
    def _sample_diffuse(self, material: ti.i32, point: vec3, normal: vec3) -> vec3:
        tangent, bitangent = self._orthonormal_basis(normal)
        start = point + normal * SURFACE_EPSILON
        white = vec3(1.0, 1.0, 1.0)
        total = vec3(0.0, 0.0, 0.0)
        for s in range(self._num_samples[None]):
            local = self._directions[s]
            direction = tm.normalize(local.x * tangent + local.y * bitangent + local.z * normal)
            struck, _ = self._nearest_hit(start, direction)
            if struck >= 0:
                emission = self._total_emission(self._primitive_materials[struck], white)
                cosine = ti.max(0.0, tm.dot(direction, normal))
                total += emission * self._material_colors[material] * cosine
        return total / self._num_samples[None]

    @ti.func
    def _shade_pixel(self, x: ti.i32, y: ti.i32) -> vec3:
        origin = self._camera_origin[None]
        target = self._screen_lo[None] + self._pixel_step[None] * vec3(x, y, 0.0)
        direction = tm.normalize(target - origin)

        color = vec3(0.0, 0.0, 0.0)
        nearest, t = self._nearest_hit(origin, direction)
        if nearest >= 0:
            point = origin + t * direction
            normal = self._surface_normal(nearest, point)
            material = self._primitive_materials[nearest]
            if self._material_kinds[material] == _EMISSIVE:
                color = self._total_emission(material, vec3(1.0, 1.0, 1.0))
            else:
                color = self._sample_diffuse(material, point, normal)
        return color

    @ti.kernel
    def _render_kernel(self, width: ti.i32, height: ti.i32):
        ti.loop_config(serialize=True)
        for x, y in ti.ndrange(width, height):
            self._colors[x, y] = self._shade_pixel(x, y)

    # =========================================================================
    # Public Rendering API
    # =========================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def samples_per_axis(self) -> int:
        return self._samples_per_axis

    @timed
    def render(self) -> npt.NDArray[np.uint8]:
        """Render the uploaded scene.

        Returns:
            Array of shape (height, width, 3) with dtype uint8, laid out like
            ``hemitrace.core.render.render_image``.
        """
        self._render_kernel(self._width, self._height)
        # Field is indexed [x, y]; images are [row, column]
        colors = np.transpose(self._colors.to_numpy(), (1, 0, 2))
        return image_to_uint8(colors)

    def __repr__(self) -> str:
        return (
            f"KernelRenderer(width={self._width}, height={self._height}, "
            f"samples_per_axis={self._samples_per_axis})"
        )
