# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""File I/O utilities for loading YAML query jobs and exporting JSON results."""

import json
import yaml
from pathlib import Path
from datetime import datetime

from .config import GeometryConfig
from .query import Query


def load_query_job(yaml_path):
    """
    Load a query job from a YAML file.

    Parameters
    ----------
    yaml_path : str
        Path to the YAML job file.

    Returns
    -------
    tuple
        A tuple containing the following elements:
        - queries : list
            List of Query objects.
        - config : GeometryConfig
            Settings from the optional 'settings' key.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML structure is invalid.

    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Job file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        job = yaml.safe_load(f)

    if not isinstance(job, dict):
        raise ValueError("Job file must contain a mapping")

    if 'queries' not in job:
        raise ValueError("Missing required key in YAML: 'queries'")

    if not job['queries']:
        raise ValueError("No queries defined in job")

    config = GeometryConfig.from_dict(job.get('settings'))

    queries = []
    names = set()
    for i, query_dict in enumerate(job['queries']):
        if not isinstance(query_dict, dict):
            raise ValueError(f"Query {i} must be a mapping")

        segment_dict = query_dict.get('segment')
        if not isinstance(segment_dict, dict) or 'start' not in segment_dict or 'end' not in segment_dict:
            raise ValueError(f"Query {i} missing segment 'start' or 'end'")

        target_dict = query_dict.get('target')
        if not isinstance(target_dict, dict) or 'type' not in target_dict:
            raise ValueError(f"Query {i} missing target 'type'")

        query = Query(query_dict, name=f"query_{i}", config=config)
        if query.name in names:
            raise ValueError(f"Duplicate query name: '{query.name}'")
        names.add(query.name)

        queries.append(query)

    return queries, config


def export_to_json(queries, output_path, metadata=None):
    """
    Export evaluated query results to a JSON file.

    Parameters
    ----------
    queries : list
        List of Query objects. Queries must be evaluated before export.
    output_path : str
        Path where the JSON file will be written.
    metadata : dict, optional
        Optional metadata to include in the output file.

    Raises
    ------
    RuntimeError
        If any query has not been evaluated yet.

    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    for query in queries:
        if not query.is_evaluated:
            raise RuntimeError(f"Query '{query.name}' has not been evaluated yet - cannot export")

    data = {
        'metadata': {
            'generated_at': datetime.now().isoformat(),
            'num_queries': len(queries),
            'num_intersecting': sum(1 for query in queries if query.result['intersects'])
        },
        'queries': {}
    }

    if metadata:
        data['metadata'].update(metadata)

    for query in queries:
        data['queries'][query.name] = query.to_dict()

    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)


def auto_generate_output_path(input_path):
    """
    Generate a timestamped output path next to the input file.

    The output directory is a 'generated' folder beside the job file.
    """
    input_path = Path(input_path)
    job_name = input_path.stem
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    output_dir = input_path.parent / "generated"
    output_dir.mkdir(parents=True, exist_ok=True)

    output_filename = f"{job_name}_{timestamp}.json"
    return output_dir / output_filename
