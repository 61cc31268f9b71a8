from __future__ import annotations

from dataclasses import dataclass

from .cadangan.mysql_cadangan_repository import MySQLCadanganRepository
from .cadangan.service import CadanganService
from .database.connection import DBConfig, DatabaseConnection
from .dependents.mysql_dependent_repository import MySQLDependentRepository
from .dependents.service import DependentService
from .members.mysql_member_repository import MySQLMemberRepository
from .members.mysql_member_tag_repository import MySQLMemberTagRepository
from .members.service import MemberService
from .payments.mysql_payment_history_repository import MySQLPaymentHistoryRepository
from .payments.service import PaymentService
from .persons.mysql_person_repository import MySQLPersonRepository
from .tabung.mysql_kutipan_repository import MySQLKutipanRepository
from .tabung.mysql_tabung_repository import MySQLTabungRepository, MySQLTabungTypeRepository
from .tabung.service import KutipanService, TabungService
from .tags.mysql_tag_repository import MySQLTagRepository
from .tags.service import TagService
from .tetapan.mysql_tetapan_repository import MySQLTetapanRepository, MySQLTetapanTypeRepository
from .tetapan.service import TetapanService, TetapanTypeService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    member_service: MemberService
    dependent_service: DependentService
    payment_service: PaymentService
    tag_service: TagService
    cadangan_service: CadanganService
    tetapan_service: TetapanService
    tetapan_type_service: TetapanTypeService
    tabung_service: TabungService
    kutipan_service: KutipanService


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    persons_repo = MySQLPersonRepository(conn)
    members_repo = MySQLMemberRepository(conn)
    member_tags_repo = MySQLMemberTagRepository(conn)
    tags_repo = MySQLTagRepository(conn)
    dependents_repo = MySQLDependentRepository(conn)
    payments_repo = MySQLPaymentHistoryRepository(conn)
    cadangan_repo = MySQLCadanganRepository(conn)
    tetapan_repo = MySQLTetapanRepository(conn)
    tetapan_types_repo = MySQLTetapanTypeRepository(conn)
    tabung_types_repo = MySQLTabungTypeRepository(conn)
    tabung_repo = MySQLTabungRepository(conn)
    kutipan_repo = MySQLKutipanRepository(conn)

    payment_service = PaymentService(payments_repo)
    member_service = MemberService(
        members_repo,
        persons_repo,
        member_tags_repo,
        dependents_repo,
        payments_repo,
        payment_service,
    )
    dependent_service = DependentService(dependents_repo, members_repo, persons_repo)

    return Container(
        conn=conn,
        member_service=member_service,
        dependent_service=dependent_service,
        payment_service=payment_service,
        tag_service=TagService(tags_repo),
        cadangan_service=CadanganService(cadangan_repo),
        tetapan_service=TetapanService(tetapan_repo),
        tetapan_type_service=TetapanTypeService(tetapan_types_repo),
        tabung_service=TabungService(tabung_types_repo, tabung_repo),
        kutipan_service=KutipanService(kutipan_repo, tabung_repo),
    )
