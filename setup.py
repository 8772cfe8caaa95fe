from setuptools import setup, find_packages

# Find all packages in the current directory
packages = find_packages(exclude=['tests', 'tests.*'])

setup(
    name='v-connection-string',
    version='1.0.0',
    description='Parses Vertica connection strings and socket paths into connection configuration',
    long_description=open('README.md', encoding='utf-8').read(),
    long_description_content_type='text/markdown',
    author='v-connection-string contributors',
    packages=packages,
    # Requires >= Python 3.10
    python_requires='>=3.10',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    zip_safe=False,
)
