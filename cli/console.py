"""Console UI for ipormac application."""

import requests

from cli.api_client import DrillAPIClient

VALID_ANSWERS = {'1', '2', '3', '4', 'ipv4', 'ipv6', 'mac', 'none'}


class ConsoleUI:
    """Console user interface for ipormac application."""

    def __init__(self, client: DrillAPIClient):
        self.client = client

    def print_question(self, question: dict):
        """Print the address and the answer options."""
        print('\n' + '=' * 50)
        print(f"  {question['address']}")
        print('=' * 50)
        options = '  '.join(f"[{a['shortcut']}] {a['text']}" for a in question['answers'])
        print(options)

    def print_result(self, result: dict):
        """Print feedback for an answer."""
        print('-' * 40)
        print(result['message'])
        print(result['explanation'])
        if result.get('corrected_address'):
            print(f"Valid form: {result['corrected_address']}")
        if result['streak_emojis']:
            print(f"Streak: {result['streak']} {result['streak_emojis']}")
        stats = result['stats']
        level = stats['level']
        print(f"{level['emoji']} {level['title']} | {stats['total_points']} points | "
              f"{stats['accuracy']:.0f}% accuracy")
        print('-' * 40)

    def print_stats(self, stats: dict):
        """Print overall and per-type statistics."""
        overall = stats['overall']
        level = overall['level']
        print('\n' + '=' * 50)
        print('YOUR PROGRESS')
        print('=' * 50)
        print(f"\n{level['emoji']} {level['title']} - {level['description']}")

        next_level = overall['next_level']
        if next_level:
            print(f"Progress to {next_level['title']}: {overall['progress']:.0f}%")
            if overall['total_points'] < next_level['min_points']:
                missing = next_level['min_points'] - overall['total_points']
                print(f"  {missing} more points needed "
                      f"({overall['total_points']}/{next_level['min_points']})")
            if overall['accuracy'] < next_level['min_accuracy']:
                print(f"  {next_level['min_accuracy']:.0f}% accuracy required "
                      f"(currently {overall['accuracy']:.0f}%)")
        else:
            print('Maximum level reached!')

        print(f"\nTotal attempts: {overall['total_attempts']}")
        print(f"Correct: {overall['total_correct']}")
        print(f"Points: {overall['total_points']}")
        print(f"Accuracy: {overall['accuracy']:.1f}%")
        print(f"Streak: {stats['streak']} {stats['streak_emojis']}")

        print('\nBy type:')
        for address_type, entry in stats['by_type'].items():
            print(f"  {address_type:<6} {entry['correct']}/{entry['attempts']} "
                  f"({entry['accuracy']:.0f}%)")
        print('\n' + '=' * 50 + '\n')

    def print_hints(self, hints: dict):
        """Print address format rules."""
        print('\n--- ADDRESS FORMATS ---')
        for hint in hints['hints']:
            print(f"{hint['title']}: {hint['description']}")
            for example in hint['examples']:
                print(f"    {example}")
        print('-----------------------')

    def print_check(self, check: dict):
        """Print the classification of one token and why it fails each family."""
        print(f"{check['address']!r}: {check['type']}")
        for family, defect in check['defects'].items():
            if defect:
                print(f"  not {family}: {defect['reason']}")

    def print_sites(self, sites: dict):
        for site in sites['sites']:
            saved = ' (has scores)' if site['has_history'] else ''
            print(f"{site['icon']} {site['site_key']} - {site['title']}{saved}")

    def confirm_reset(self) -> bool:
        answer = input('Reset all scores? This cannot be undone. [y/N] ').strip().lower()
        return answer in ('y', 'yes')

    def run(self):
        """Run the main quiz loop."""
        try:
            health = self.client.health_check()
            print(f"Connected to ipormac server ({health['service']})")
        except requests.RequestException:
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py")
            return

        stats = self.client.get_stats()
        level = stats['overall']['level']
        print(f"Restored: {stats['overall']['total_attempts']} attempts, "
              f"{level['emoji']} {level['title']}")
        print('\nIs it IPv4, IPv6, MAC or none of these?')
        print('Commands: 1-4 to answer, "hint" for format rules, "stats" for progress, '
              '"reset" to start over, "exit" to quit\n')

        while True:
            try:
                question = self.client.get_question()
            except requests.RequestException as e:
                print(f"Error getting question: {e}")
                return

            self.print_question(question)

            answer = ''
            while not answer:
                user_input = input('==> ').strip()
                command = user_input.lower()

                if command == 'exit':
                    print('Goodbye!')
                    return

                elif command == 'hint':
                    self.print_hints(self.client.get_hints())
                    self.print_question(question)

                elif command == 'stats':
                    self.print_stats(self.client.get_stats())
                    self.print_question(question)

                elif command == 'reset':
                    if self.confirm_reset():
                        self.print_stats(self.client.reset_scores())
                    self.print_question(question)

                elif command in VALID_ANSWERS:
                    answer = user_input

                elif user_input:
                    print('Please answer 1-4 (IPv4, IPv6, MAC, None).')

            try:
                result = self.client.submit_answer(question['question_id'], answer)
            except requests.RequestException as e:
                print(f"Error submitting answer: {e}")
                continue
            self.print_result(result)
