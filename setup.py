from Cython.Build import cythonize
from setuptools import Extension, find_packages, setup

# field and group arithmetic are the hot paths; everything else stays pure Python
_COMPILED_MODULES = ("ethsig.ecdsa.field", "ethsig.ecdsa.curve")

cythonized_extensions = cythonize(
    [
        Extension(
            name,
            ["src/" + name.replace(".", "/") + ".py"],
            extra_compile_args=[
                "-O3",
                "-march=native",
                "-Wno-unused-function",
                "-Wno-unused-variable",
            ],
            language="c",
        )
        for name in _COMPILED_MODULES
    ],
    compiler_directives={
        "language_level": 3,
        "annotation_typing": False,
        "boundscheck": False,
        "wraparound": False,
        "nonecheck": False,
        "initializedcheck": False,
    },
    build_dir="build/cython",
)
# a failed C build leaves the .py modules in place
for ext in cythonized_extensions:
    ext.optional = True

if __name__ == "__main__":
    setup(
        name="ethsig",
        version="0.1.0",
        description="secp256k1 recoverable ECDSA, keccak256 and RLP for Ethereum-style signatures",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        ext_modules=cythonized_extensions,
        extras_require={"test": ["pytest"]},
        entry_points={"console_scripts": ["ethsig = ethsig.cli:main"]},
    )
