import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import networkx as nx

from .errors import require
from .models import Course, Student

logger = logging.getLogger(__name__)

Record = Tuple[str, Sequence[str]]


class ConflictGraph:
    """Courses as vertices, shared enrollments as edges.

    Backed by an undirected ``nx.Graph`` keyed by course name. Each node
    carries its ``Course`` under the ``course`` attribute and each edge the
    list of students that caused it under ``students``. networkx keeps node,
    edge and adjacency order equal to insertion order, which the colourer
    and the reports rely on.
    """

    def __init__(self):
        self.G = nx.Graph()
        self.students: List[Student] = []

    # vertices

    def course(self, name: str) -> Course:
        """Return the course called ``name``, creating it on first mention."""
        require(name is not None, "course name must not be None")
        if name in self.G:
            return self.G.nodes[name]["course"]
        c = Course(name)
        self.G.add_node(name, course=c)
        return c

    def get_course(self, name: str) -> Optional[Course]:
        if name not in self.G:
            return None
        return self.G.nodes[name]["course"]

    def courses(self) -> Iterator[Course]:
        for _, c in self.G.nodes(data="course"):
            yield c

    def __contains__(self, name: str) -> bool:
        return name in self.G

    def __len__(self) -> int:
        return self.G.number_of_nodes()

    def neighbors(self, course: Course) -> Iterator[Course]:
        for name in self.G.neighbors(course.name):
            yield self.G.nodes[name]["course"]

    def degree(self, course: Course) -> int:
        return self.G.degree(course.name)

    # edges

    def edge_label(self, a: Course, b: Course) -> Optional[List[Student]]:
        data = self.G.get_edge_data(a.name, b.name)
        if data is None:
            return None
        return data["students"]

    def add_conflict(self, a: Course, b: Course, student: Student) -> None:
        """Record that ``student`` sits both ``a`` and ``b``."""
        require(a is not None and b is not None and student is not None,
                "courses and student must not be None")
        require(a is not b and a.name != b.name,
                f"conflict graph is simple; cannot join {a.name} to itself")
        label = self.edge_label(a, b)
        if label is None:
            self.G.add_edge(a.name, b.name, students=[student])
        elif not any(s is student for s in label):
            label.append(student)

    def conflicts(self) -> Iterator[Tuple[Course, Course, List[Student]]]:
        for u, v, students in self.G.edges(data="students"):
            yield self.G.nodes[u]["course"], self.G.nodes[v]["course"], students

    def number_of_conflicts(self) -> int:
        return self.G.number_of_edges()


def add_student(graph: ConflictGraph, name: str, course_names: Iterable[str]) -> Student:
    require(name is not None, "student name must not be None")
    stu = Student(name)
    for cname in course_names:
        stu.add_course(graph.course(cname))
    courses = stu.courses
    for i in range(len(courses)):
        for j in range(i + 1, len(courses)):
            graph.add_conflict(courses[i], courses[j], stu)
    graph.students.append(stu)
    return stu


def build_conflict_graph(records: Iterable[Record], graph: Optional[ConflictGraph] = None) -> ConflictGraph:
    if graph is None:
        graph = ConflictGraph()
    for name, course_names in records:
        add_student(graph, name, course_names)
    logger.info("conflict graph built: %d courses, %d conflicts, %d students",
                len(graph), graph.number_of_conflicts(), len(graph.students))
    return graph
