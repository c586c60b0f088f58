from setuptools import setup, find_packages

with open('README.md') as f:
    readme = f.read()

setup(
    name='markupbuilder',
    version='0.2.0',
    description='Build, mutate and render html node trees with reusable components',
    long_description=readme,
    long_description_content_type='text/markdown',
    author='Paul Webb',
    author_email='p@technobok.org',
    python_requires='>=3.8',
    packages=find_packages(exclude=('tests', 'docs')),
    extras_require={
        'test': ['pytest'],
    },
)
