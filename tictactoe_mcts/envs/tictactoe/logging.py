"""
Result recording utilities for experiments.
"""

import os

import pandas as pd


def record_to_table(env, game_result, num_moves, start_time, end_time, time_used):
    """
    Append one game's results to a CSV table in the table_dir directory.
    Creates the CSV file if it doesn't exist. Columns introduced by the
    current row are added to an existing table (older rows get nulls).
    Returns the CSV path.
    """
    table_dir = env.args.get('table_dir') or 'results'
    os.makedirs(table_dir, exist_ok=True)
    csv_file = os.path.join(table_dir, 'experiment_results.csv')

    # Add all scalar args as columns
    data_row = {}
    for key, value in env.args.items():
        if isinstance(value, (dict, list, tuple)):
            continue
        data_row[key] = value

    data_row['game_result'] = game_result.name
    data_row['game_value'] = int(game_result)
    data_row['num_moves'] = num_moves
    data_row['session_name'] = env.session_name
    data_row['start_time'] = start_time
    data_row['end_time'] = end_time
    data_row['time_used'] = time_used

    if os.path.exists(csv_file):
        existing_df = pd.read_csv(csv_file)
        all_columns = list(existing_df.columns)

        new_columns = [key for key in data_row if key not in all_columns]
        if new_columns:
            for col in new_columns:
                existing_df[col] = None
                all_columns.append(col)
            existing_df.to_csv(csv_file, index=False)

        new_row = {col: data_row.get(col, None) for col in all_columns}
        pd.DataFrame([new_row]).to_csv(csv_file, mode='a', header=False, index=False)
    else:
        pd.DataFrame([data_row]).to_csv(csv_file, index=False)

    print(f"Results recorded to: {csv_file}")
    return csv_file
