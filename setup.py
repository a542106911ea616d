import setuptools
from pathlib import Path

ROOT = Path(__file__).parent


def read_requirements(filename: str = "requirements.txt") -> list[str]:
    """Return the non-comment requirement lines of `filename`, or [] if missing."""
    req_path = ROOT / filename
    if not req_path.is_file():
        return []
    text = req_path.read_text(encoding="utf-8")
    lines = (line.split("#", 1)[0].strip() for line in text.splitlines())
    return [line for line in lines if line]


long_description = (ROOT / "README_PYPI.md").read_text(encoding="utf-8")

setuptools.setup(
    name="dispatchcore",
    version="0.1.0a0",  # PEP 440 compliant
    author="dispatchcore contributors",
    description=(
        "Shape descriptors, call modes, access tags and call contexts for "
        "dispatching differentiable compute kernels."
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords=["kernel dispatch", "autodiff", "shape", "strides", "gpu"],
    license="Apache-2.0",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering",
    ],
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=read_requirements(),
    extras_require={"test": read_requirements("requirements-test.txt")},
    include_package_data=True,
    zip_safe=False,
)
