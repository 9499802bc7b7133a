import os
from setuptools import find_packages, setup

this = os.path.dirname(os.path.realpath(__file__))


def read(name):
    with open(os.path.join(this, name)) as f:
        return f.read()


VERSION = "1.0.0"


setup(
    name="gsd-power-enums",
    version=VERSION,
    description="Print the gnome-settings-daemon power plugin constant tables",
    long_description=read("README.md"),
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=read("requirements.txt"),
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    include_package_data=True,
    zip_safe=True,
    license="GPLv3",
    keywords="linux power gnome-settings-daemon enum flags",
    classifiers=[
        "Intended Audience :: Developers",
        "Operating System :: POSIX :: Linux",
        "Environment :: Console",
    ],
    entry_points={
        "console_scripts": [
            "gsd-power-enums-update=gsd_power_enums.bin.gsd_power_enums_update:main",
        ],
    },
)
