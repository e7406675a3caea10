from setuptools import setup
import io


with io.open('README.md', encoding='utf-8') as f:
    long_description = f.read()

with io.open('requirements.txt', encoding='utf-8') as f:
    requirements = [r for r in f.read().split('\n') if len(r)]


setup(name='pyln-featureset',
      version='0.1.0',
      description='Feature set contexts and their feature bit limits for the Lightning Network protocol',
      long_description=long_description,
      long_description_content_type='text/markdown',
      url='http://github.com/ElementsProject/lightning',
      license='MIT',
      packages=['pyln.featureset'],
      scripts=[],
      zip_safe=True,
      install_requires=requirements,
      extras_require={'test': ['pytest']})
