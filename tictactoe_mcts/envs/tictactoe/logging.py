"""
Logging and result recording utilities for experiments.
"""

import os
import pandas as pd


def record_to_table(env, game_end, num_moves, start_time, end_time, time_used):
    """
    Record one finished game to a CSV table in the table_dir directory.
    Creates the CSV file if it doesn't exist, otherwise appends data.
    Columns that appear for the first time are added to the existing table.
    """
    table_dir = env.args.get('table_dir') or 'results'
    os.makedirs(table_dir, exist_ok=True)
    csv_file = os.path.join(table_dir, 'experiment_results.csv')

    # Add all args as columns
    data_row = {key: value for key, value in env.args.items()}

    data_row['game_end'] = game_end.name
    data_row['num_moves'] = num_moves
    data_row['session_name'] = env.session_name
    data_row['start_time'] = start_time
    data_row['end_time'] = end_time
    data_row['time_used'] = time_used

    new_df = pd.DataFrame([data_row])

    if os.path.exists(csv_file):
        existing_df = pd.read_csv(csv_file)
        new_columns = [col for col in new_df.columns if col not in existing_df.columns]

        if new_columns:
            # Rewrite the table with the widened header
            combined = pd.concat([existing_df, new_df], ignore_index=True, sort=False)
            combined.to_csv(csv_file, index=False)
        else:
            new_df = new_df.reindex(columns=existing_df.columns)
            new_df.to_csv(csv_file, mode='a', header=False, index=False)
    else:
        new_df.to_csv(csv_file, index=False)

    if env.args.get('logging_mode', True):
        print(f"Results recorded to: {csv_file}")
    return csv_file
