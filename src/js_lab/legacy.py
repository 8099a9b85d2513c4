"""Legacy hard-coded question list, kept for backward compatibility.

Records use the old field names (``starterCode``, ``expectedOutput``, ``hint``)
and category display names rather than category ids.
"""

LEGACY_CATEGORIES = [
    {"id": "variables", "name": "Variables", "color": "#4CAF50"},
    {"id": "functions", "name": "Functions", "color": "#2196F3"},
    {"id": "arrays", "name": "Arrays", "color": "#00BCD4"},
    {"id": "objects", "name": "Objects", "color": "#FF9800"},
    {"id": "strings", "name": "Strings", "color": "#795548"},
    {"id": "closures", "name": "Closures", "color": "#3F51B5"},
    {"id": "promises", "name": "Promises", "color": "#F44336"},
    {"id": "async", "name": "Async/Await", "color": "#E91E63"},
    {"id": "prototypes", "name": "Prototypes", "color": "#607D8B"},
    {"id": "operators", "name": "Operators", "color": "#8BC34A"},
    {"id": "boolean", "name": "Boolean", "color": "#CDDC39"},
    {"id": "scope", "name": "Scope", "color": "#9C27B0"},
]

LEGACY_QUESTIONS = [
    # Variables
    {
        "id": 1,
        "difficulty": "beginner",
        "category": "Variables",
        "question": "What will be the output of the following code?",
        "starterCode": "console.log(x);\nvar x = 5;\nconsole.log(x);",
        "expectedOutput": "undefined\n5",
        "hint": "Think about how var declarations are hoisted but assignments are not.",
        "explanation": "Due to hoisting, 'var x' is moved to the top but not its assignment. So x is undefined initially, then 5 after assignment.",
    },
    {
        "id": 2,
        "difficulty": "intermediate",
        "category": "Variables",
        "question": "What will be the output of the following code?",
        "starterCode": "for (var i = 0; i < 3; i++) {\n  setTimeout(() => console.log(i), 0);\n}",
        "expectedOutput": "3\n3\n3",
        "hint": "Think about var vs let inside loops and when the setTimeout callbacks execute.",
        "explanation": "With 'var', there's only one 'i' variable that's shared across all iterations. By the time the setTimeout callbacks execute, the loop has finished and i equals 3.",
    },
    {
        "id": 3,
        "difficulty": "beginner",
        "category": "Variables",
        "question": "What will be the output of the following code?",
        "starterCode": "let a = 3;\nlet b = 4;\na = b;\nb = 5;\nconsole.log(a);",
        "expectedOutput": "4",
        "hint": "Think about what happens when you assign one variable to another.",
        "explanation": "Variable 'a' gets the value of 'b' (which was 4), then 'b' changes to 5, but 'a' keeps its copied value of 4.",
    },
    {
        "id": 4,
        "difficulty": "intermediate",
        "category": "Variables",
        "question": "What will be the output of the following code?",
        "starterCode": "const obj = { x: 1 };\nconst obj2 = obj;\nobj.x = 2;\nconsole.log(obj2.x);",
        "expectedOutput": "2",
        "hint": "Objects are passed by reference, not by value.",
        "explanation": "When you assign an object to another variable, both variables reference the same object in memory. Changing one affects the other.",
    },
    # Functions
    {
        "id": 5,
        "difficulty": "beginner",
        "category": "Functions",
        "question": "What will be the output of the following code?",
        "starterCode": "console.log(foo());\nconsole.log(bar());\n\nfunction foo() {\n  return 'foo';\n}\n\nvar bar = function() {\n  return 'bar';\n};",
        "expectedOutput": "foo\nTypeError",
        "hint": "Function declarations are hoisted differently than function expressions.",
        "explanation": "Function declarations are fully hoisted, but function expressions are not. 'bar' is undefined when called, causing a TypeError.",
    },
    {
        "id": 6,
        "difficulty": "intermediate",
        "category": "Functions",
        "question": "What will be the output of the following code?",
        "starterCode": "function greet() {\n  console.log(\"Hello \" + this.name);\n}\n\nconst person = { name: \"Alice\" };\nconst boundGreet = greet.bind(person);\nboundGreet();",
        "expectedOutput": "Hello Alice",
        "hint": "The bind() method creates a new function with 'this' permanently set to the provided value.",
        "explanation": "bind() creates a new function where 'this' is permanently bound to the object passed as the first argument.",
    },
    # Arrays
    {
        "id": 7,
        "difficulty": "beginner",
        "category": "Arrays",
        "question": "What will be the output of the following code?",
        "starterCode": "const arr = [1, 2, 3];\nconsole.log(arr.length);",
        "expectedOutput": "3",
        "hint": "The length property returns the number of elements in an array.",
        "explanation": "The length property of an array returns the number of elements it contains.",
    },
    {
        "id": 8,
        "difficulty": "intermediate",
        "category": "Arrays",
        "question": "What will be the output of the following code?",
        "starterCode": "const numbers = [1, 2, 3, 4];\nconst doubled = numbers.map(x => x * 2);\nconsole.log(numbers);\nconsole.log(doubled);",
        "expectedOutput": "[1,2,3,4]\n[2,4,6,8]",
        "hint": "The map() method returns a new array without modifying the original.",
        "explanation": "map() creates a new array with the results of calling a function for every array element. The original array remains unchanged.",
    },
    {
        "id": 9,
        "difficulty": "intermediate",
        "category": "Arrays",
        "question": "What will be the output of the following code?",
        "starterCode": "const arr = [1, 2, 3];\nconst result1 = arr.map(x => x * 2);\nconst result2 = arr.forEach(x => x * 2);\nconsole.log(result1);\nconsole.log(result2);",
        "expectedOutput": "[2,4,6]\nundefined",
        "hint": "map() returns a new array, forEach() returns undefined.",
        "explanation": "map() returns a new array with transformed elements. forEach() returns undefined and is used for side effects only.",
    },
    # Objects
    {
        "id": 10,
        "difficulty": "intermediate",
        "category": "Objects",
        "question": "What will be the output of the following code?",
        "starterCode": "const obj1 = { a: 1 };\nconst obj2 = obj1;\nobj2.a = 2;\nconsole.log(obj1.a);",
        "expectedOutput": "2",
        "hint": "Objects are passed by reference, not by value.",
        "explanation": "Objects are reference types. When you assign obj1 to obj2, both variables point to the same object in memory.",
    },
    {
        "id": 11,
        "difficulty": "intermediate",
        "category": "Objects",
        "question": "What will be the output of the following code?",
        "starterCode": "const obj = { a: 1, b: 2, c: 3 };\nconst { a, ...rest } = obj;\nconsole.log(a);\nconsole.log(rest);",
        "expectedOutput": "1\n{b:2,c:3}",
        "hint": "Destructuring with rest operator extracts some properties and groups the rest.",
        "explanation": "Destructuring assignment allows extracting individual properties, while the rest operator (...) collects remaining properties into a new object.",
    },
    # Strings
    {
        "id": 12,
        "difficulty": "beginner",
        "category": "Strings",
        "question": "What will be the output of the following code?",
        "starterCode": "const str = \"Hello\";\nconsole.log(str.toUpperCase());",
        "expectedOutput": "HELLO",
        "hint": "The toUpperCase() method converts a string to uppercase letters.",
        "explanation": "The toUpperCase() method returns a new string with all characters converted to uppercase.",
    },
    {
        "id": 13,
        "difficulty": "intermediate",
        "category": "Strings",
        "question": "What will be the output of the following code?",
        "starterCode": "console.log('5' + 3);\nconsole.log('5' - 3);\nconsole.log('5' * 3);",
        "expectedOutput": "53\n2\n15",
        "hint": "+ operator behaves differently with strings vs other arithmetic operators.",
        "explanation": "'+' with strings does concatenation (53), while '-' and '*' convert strings to numbers for arithmetic (2, 15).",
    },
    # Closures
    {
        "id": 14,
        "difficulty": "advanced",
        "category": "Closures",
        "question": "What will be the output of the following code?",
        "starterCode": "function createCounter() {\n  let count = 0;\n  return function() {\n    return ++count;\n  };\n}\n\nconst counter1 = createCounter();\nconst counter2 = createCounter();\nconsole.log(counter1());\nconsole.log(counter1());\nconsole.log(counter2());",
        "expectedOutput": "1\n2\n1",
        "hint": "Each call to createCounter() creates a new closure with its own count variable.",
        "explanation": "Each invocation of createCounter() creates a new execution context with its own 'count' variable. The returned functions form closures that remember their respective 'count' variables.",
    },
    # Promises
    {
        "id": 15,
        "difficulty": "intermediate",
        "category": "Promises",
        "question": "What will be the output of the following code?",
        "starterCode": "console.log(\"1\");\nPromise.resolve().then(() => console.log(\"2\"));\nconsole.log(\"3\");",
        "expectedOutput": "1\n3\n2",
        "hint": "Think about the event loop and microtasks vs macrotasks.",
        "explanation": "Synchronous code executes first, then microtasks (Promise.then) execute before the next macrotask. So '1' and '3' print first, then '2'.",
    },
    {
        "id": 16,
        "difficulty": "advanced",
        "category": "Async/Await",
        "question": "What will be the output of the following code?",
        "starterCode": "async function test() {\n  console.log(\"A\");\n  await Promise.resolve();\n  console.log(\"B\");\n}\n\nconsole.log(\"1\");\ntest();\nconsole.log(\"2\");",
        "expectedOutput": "1\nA\n2\nB",
        "hint": "async/await doesn't block the main thread. The function pauses at 'await' and resumes later.",
        "explanation": "The async function executes synchronously until it hits 'await', then it pauses and returns control to the main thread. The awaited promise resolves in the microtask queue.",
    },
    # Prototypes
    {
        "id": 17,
        "difficulty": "advanced",
        "category": "Prototypes",
        "question": "What will be the output of the following code?",
        "starterCode": "function Person(name) {\n  this.name = name;\n}\n\nPerson.prototype.greet = function() {\n  return \"Hello, \" + this.name;\n};\n\nconst john = new Person(\"John\");\nconsole.log(john.greet());",
        "expectedOutput": "Hello, John",
        "hint": "Constructor functions and prototype methods work together to create object instances.",
        "explanation": "The 'new' keyword creates an instance that inherits from Person.prototype. The greet method is available through the prototype chain.",
    },
    # Operators
    {
        "id": 18,
        "difficulty": "beginner",
        "category": "Operators",
        "question": "What will be the output of the following code?",
        "starterCode": "console.log(5 + \"3\");",
        "expectedOutput": "53",
        "hint": "JavaScript performs type coercion when using the + operator with different types.",
        "explanation": "When using + with a number and string, JavaScript converts the number to a string and concatenates them.",
    },
    # Boolean
    {
        "id": 19,
        "difficulty": "beginner",
        "category": "Boolean",
        "question": "What will be the output of the following code?",
        "starterCode": "console.log(Boolean(\"\"));\nconsole.log(Boolean(\"hello\"));",
        "expectedOutput": "false\ntrue",
        "hint": "Empty strings are falsy, non-empty strings are truthy.",
        "explanation": "In JavaScript, empty strings evaluate to false, while non-empty strings evaluate to true.",
    },
    # Scope
    {
        "id": 20,
        "difficulty": "intermediate",
        "category": "Scope",
        "question": "What will be the output of the following code?",
        "starterCode": "for (var i = 0; i < 3; i++) {\n  setTimeout(() => console.log(i), 0);\n}",
        "expectedOutput": "3\n3\n3",
        "hint": "Think about var vs let inside loops and when the setTimeout callbacks execute.",
        "explanation": "With 'var', there's only one 'i' variable that's shared across all iterations. By the time the setTimeout callbacks execute, the loop has finished and i equals 3.",
    },
]
