import setuptools

about = {}
with open('sternbrocot/_version.py') as f:
    exec(f.read(), about)

setuptools.setup(
    name='sternbrocot',
    version=about['__version__'],
    packages=['sternbrocot'],
    python_requires='>=3.7.0',
    install_requires=['sortedcontainers'],
    extras_require={
        'test': ['pytest', 'numpy'],
    },
    include_package_data=True,
    data_files=[
        ('', ['README.md', 'CHANGELOG.md']),
    ],
)
