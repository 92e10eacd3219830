from django.core.management.base import BaseCommand, CommandError

from apps.transactions.utils import DatasetFetchError, sync_dataset


class Command(BaseCommand):
    help = '외부 데이터셋을 내려받아 거래 데이터를 전체 교체합니다.'

    def add_arguments(self, parser):
        parser.add_argument('--url', type=str, default=None, help='데이터셋 URL (기본값: TRANSACTIONS_DATASET_URL)')

    def handle(self, *args, **options):
        self.stdout.write("📥 데이터셋 동기화 시작...")

        try:
            transactions = sync_dataset(options['url'])
        except DatasetFetchError as e:
            raise CommandError(f"❌ {e}") from e

        self.stdout.write(self.style.SUCCESS(f"✅ 거래 {len(transactions)}건 저장 완료!"))
