import os
from setuptools import setup, find_packages

about = {}
with open(os.path.join("python", "zksha256", "__about__.py")) as file:
    exec(file.read(), about)


setup(
    name="zksha256",
    version=about["__version__"],
    description="SHA256 over binary finite-field elements, for zero-knowledge circuits",
    packages=find_packages(where="python"),
    package_dir={
        "": "python",
    },
    python_requires=">=3.9",
    install_requires=[
        "mpyc",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    zip_safe=False,
)
